"""
Settings Templating

Renders ${NAME} placeholders in createConfig/setEnv values from the
environment.
"""

import json
import re
from typing import Any, Callable, Dict, Mapping, Optional

from jinja2 import Environment, StrictUndefined, TemplateError, UndefinedError

UNDEFINED_NAME = re.compile(r"'([^']+)' is undefined")

_environment = Environment(
    variable_start_string="${",
    variable_end_string="}",
    undefined=StrictUndefined,
    keep_trailing_newline=True,
    autoescape=False,
)


def build_template_context(
    env: Mapping[str, str], version: Optional[str] = None
) -> Dict[str, Any]:
    """
    Build the variables available to templates.

    Args:
        env: Environment variables
        version: Version from package.json

    Returns:
        Environment plus version and npm_package_version
    """
    context: Dict[str, Any] = dict(env)
    if version is not None:
        context["version"] = version
        context["npm_package_version"] = version
    return context


def render_value(
    template: str,
    context: Mapping[str, Any],
    name: str,
    on_warning: Optional[Callable[[str], None]] = None,
) -> str:
    """
    Render one template string.

    Undefined variables (and malformed templates) render as an empty string
    with a warning naming the setting.
    """
    try:
        return _environment.from_string(template).render(**context)
    except UndefinedError as e:
        match = UNDEFINED_NAME.search(str(e))
        variable = match.group(1) if match else str(e)
        reason = f"[cyan]{variable}[/cyan] is not defined in environment"
    except TemplateError as e:
        reason = f"Issue templating config file: {e}"

    if on_warning:
        on_warning(f"{reason}. Setting [cyan]{name}[/cyan] to an empty string.")
    return ""


def _render(
    value: Any,
    context: Mapping[str, Any],
    name: str,
    on_warning: Optional[Callable[[str], None]],
) -> str:
    if isinstance(value, str):
        return render_value(value, context, name, on_warning)
    return json.dumps(value)


def render_settings(
    settings: Mapping[str, Any],
    context: Mapping[str, Any],
    on_warning: Optional[Callable[[str], None]] = None,
) -> Dict[str, Any]:
    """
    Render a settings block one level deep.

    String values are rendered as templates, other scalars are serialized
    as JSON (true, 3). Mapping values have each child rendered (named
    "parent.child" in warnings).
    """
    rendered: Dict[str, Any] = {}
    for parent_name, parent in settings.items():
        if isinstance(parent, Mapping):
            rendered[parent_name] = {
                child_key: _render(
                    child, context, f"{parent_name}.{child_key}", on_warning
                )
                for child_key, child in parent.items()
            }
        else:
            rendered[parent_name] = _render(
                parent, context, parent_name, on_warning
            )
    return rendered
