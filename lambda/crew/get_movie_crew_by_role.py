import os
import re
import logging
from botocore.exceptions import ClientError

from common.response import response
from common.store import create_crew_table, query_crew

MOVIE_ID_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)


def resolve_log_level(name):
    level = logging.getLevelNamesMapping().get(str(name or "").strip().upper())
    return level if level is not None else logging.INFO


logger = logging.getLogger()
logger.setLevel(resolve_log_level(os.environ.get("LOG_LEVEL")))

MSG_INVALID_PARAMS = "Missing or invalid parameters"
MSG_NOT_FOUND = "Crew member not found for the specified role and movie"
MSG_NO_SUBSTRING_MATCH = "No crew member names contain the provided substring"


def _parse_movie_id(raw):
    if raw is None:
        return None
    s = str(raw).strip()
    # plain ASCII digits only
    if not MOVIE_ID_PATTERN.fullmatch(s):
        return None
    # a zero id is treated as missing
    return int(s) or None


def _names_of(item):
    names = item.get("names")
    if names is None:
        return ""
    if isinstance(names, str):
        return names
    # string sets come back unordered
    if isinstance(names, (set, frozenset)):
        return ", ".join(sorted(str(n) for n in names))
    if isinstance(names, (list, tuple)):
        return ", ".join(str(n) for n in names)
    return str(names)


def filter_by_name(items, name_substring):
    if not name_substring:
        return items
    return [it for it in items if name_substring in _names_of(it)]


def _http_method(event):
    # REST API (v1) or HTTP API (v2) payload
    method = event.get("httpMethod")
    if method:
        return method
    http = (event.get("requestContext") or {}).get("http") or {}
    return http.get("method")


def lambda_handler(event, context):
    # CORS preflight
    if _http_method(event) == "OPTIONS":
        return response(200, {})

    path_params = event.get("pathParameters") or {}
    qs = event.get("queryStringParameters") or {}

    role = path_params.get("role")
    movie_id = _parse_movie_id(path_params.get("movieId"))
    name_substring = qs.get("name")

    logger.info(f"Fetching crew member for role {role} and movieId {movie_id}")

    if not role or movie_id is None:
        logger.error(MSG_INVALID_PARAMS)
        return response(400, {"message": MSG_INVALID_PARAMS})

    try:
        table = create_crew_table()
        items = query_crew(table, movie_id, role)

        if not items:
            logger.error(MSG_NOT_FOUND)
            return response(404, {"message": MSG_NOT_FOUND})

        matched = filter_by_name(items, name_substring)
        if not matched:
            logger.error(MSG_NO_SUBSTRING_MATCH)
            return response(404, {"message": MSG_NO_SUBSTRING_MATCH})

        names = ", ".join(_names_of(it) for it in matched)
        return response(200, {"role": role, "names": names})

    except ClientError as e:
        logger.exception("Error fetching movie crew by role")
        msg = e.response.get("Error", {}).get("Message") or str(e)
        return response(500, {"message": "Internal Server Error", "error": msg})
    except Exception as e:
        logger.exception("Error fetching movie crew by role")
        return response(500, {"message": "Internal Server Error", "error": str(e)})
