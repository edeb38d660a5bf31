import os
import boto3
from boto3.dynamodb.conditions import Key


class MissingConfigurationError(RuntimeError):
    pass


def get_table_name() -> str:
    name = os.environ.get("TABLE_NAME")
    if not name:
        raise MissingConfigurationError("TABLE_NAME is not set")
    return name


def get_region() -> str | None:
    return os.environ.get("REGION") or os.environ.get("AWS_REGION")


def create_crew_table():
    """
    Build a fresh DynamoDB table handle for this invocation.
    Table name and region come from the function environment.
    """
    table_name = get_table_name()
    dynamodb = boto3.resource("dynamodb", region_name=get_region())
    return dynamodb.Table(table_name)


def query_crew(table, movie_id: int, role: str) -> list[dict]:
    # PK: movieId (N), SK: crewRole (S); first page only
    resp = table.query(
        KeyConditionExpression=Key("movieId").eq(movie_id) & Key("crewRole").eq(role)
    )
    return resp.get("Items", [])
