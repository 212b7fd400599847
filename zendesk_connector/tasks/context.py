"""
Run context - renders dynamic task properties

Properties may hold Jinja2 templates such as "{{ execution.id }}" or
"{{ secret('ZENDESK_TOKEN') }}". Rendering is strict: an undefined variable
or unknown secret fails the run instead of producing an empty string.
"""
from enum import Enum
from typing import Any, Dict, Optional, Type

from jinja2 import Environment, StrictUndefined, TemplateError

from zendesk_connector.exceptions import RenderingFailure


class RunContext:
    """
    Rendering context for one task run

    Args:
        variables: Values available to templates
        secrets: Values reachable through secret(name)
    """

    def __init__(
        self,
        variables: Optional[Dict[str, Any]] = None,
        secrets: Optional[Dict[str, str]] = None
    ):
        self.variables = variables or {}
        self._secrets = secrets or {}
        self._env = Environment(undefined=StrictUndefined, autoescape=False)
        self._env.globals["secret"] = self._secret

    def _secret(self, name: str) -> str:
        if name not in self._secrets:
            raise RenderingFailure(f"Unknown secret '{name}'")
        return self._secrets[name]

    def render(self, value: Any) -> Any:
        """
        Render a property value

        Strings are rendered as templates, lists element-wise; None and
        other values are returned unchanged.
        """
        if value is None:
            return None
        if isinstance(value, list):
            return [self.render(item) for item in value]
        if isinstance(value, str) and not isinstance(value, Enum):
            return self._render_string(value)
        return value

    def _render_string(self, template: str) -> str:
        if "{{" not in template and "{%" not in template:
            return template
        try:
            return self._env.from_string(template).render(**self.variables)
        except TemplateError as e:
            raise RenderingFailure(f"Failed to render '{template}': {e}", template=template) from e

    def render_as(self, value: Any, type_: Type) -> Any:
        """
        Render a property and coerce it to type_

        Args:
            value: Raw property value
            type_: int or an Enum subclass

        Returns:
            Coerced value, or None if the property is unset

        Raises:
            RenderingFailure: If rendering or coercion fails
        """
        rendered = self.render(value)
        if rendered is None:
            return None

        if isinstance(type_, type) and issubclass(type_, Enum):
            return self._as_enum(rendered, type_)

        if type_ is int:
            if isinstance(rendered, bool):
                raise RenderingFailure(f"Expected an integer, got {rendered!r}")
            if isinstance(rendered, int):
                return rendered
            try:
                return int(str(rendered).strip())
            except ValueError as e:
                raise RenderingFailure(f"Expected an integer, got {rendered!r}") from e

        return rendered

    @staticmethod
    def _as_enum(rendered: Any, enum_type: Type[Enum]) -> Enum:
        if isinstance(rendered, enum_type):
            return rendered
        text = str(rendered).strip()
        # Names as written in workflow definitions (NORMAL), values as sent on the wire (normal)
        if text.upper() in enum_type.__members__:
            return enum_type[text.upper()]
        for member in enum_type:
            if member.value == text:
                return member
        allowed = ", ".join(enum_type.__members__)
        raise RenderingFailure(f"Invalid {enum_type.__name__} '{text}', expected one of: {allowed}")
