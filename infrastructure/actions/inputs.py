import os
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from domain.errors import ConfigurationError
from domain.naming import validate_name_pattern
from infrastructure.github.github_client import DEFAULT_API_URL, DEFAULT_TIMEOUT_SECONDS


class ActionInputs(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str = Field(..., min_length=1, repr=False)
    name_pattern: str = Field(..., min_length=1)
    request_timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    api_url: str = Field(default=DEFAULT_API_URL, min_length=1)
    debug: bool = False


def _input_env_name(name: str) -> str:
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(
    name: str,
    *,
    required: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Read an action input the way the runner exposes it (``INPUT_<NAME>``)."""
    environ = os.environ if environ is None else environ
    value = environ.get(_input_env_name(name), "").strip()
    if required and not value:
        raise ConfigurationError(f"Input required and not supplied: {name}")
    return value


def is_debug(environ: Mapping[str, str] | None = None) -> bool:
    environ = os.environ if environ is None else environ
    return environ.get("RUNNER_DEBUG") == "1"


def _describe_validation_error(error: ValidationError) -> str:
    problems = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue["loc"]) or "inputs"
        problems.append(f"{location}: {issue['msg']}")
    return "Invalid action inputs: " + "; ".join(problems)


def load_action_inputs(environ: Mapping[str, str] | None = None) -> ActionInputs:
    environ = os.environ if environ is None else environ
    token = get_input("token", required=True, environ=environ)
    name_pattern = validate_name_pattern(get_input("name_pattern", required=True, environ=environ))

    optional_fields: dict[str, str] = {}
    request_timeout = get_input("request_timeout", environ=environ)
    if request_timeout:
        optional_fields["request_timeout"] = request_timeout
    api_url = environ.get("GITHUB_API_URL", "").strip()
    if api_url:
        optional_fields["api_url"] = api_url

    try:
        return ActionInputs(
            token=token,
            name_pattern=name_pattern,
            debug=is_debug(environ),
            **optional_fields,
        )
    except ValidationError as error:
        raise ConfigurationError(_describe_validation_error(error)) from error
