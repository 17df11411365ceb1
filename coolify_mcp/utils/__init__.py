from .response_utils import parse_body, to_json_text  # type: ignore
