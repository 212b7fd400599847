"""
Tests for property rendering
"""
import pytest

from zendesk_connector.exceptions import RenderingFailure
from zendesk_connector.models import Priority, TicketType
from zendesk_connector.tasks import RunContext


class TestRender:
    """Test RunContext.render"""

    def test_plain_string_unchanged(self, run_context):
        assert run_context.render("Workflow failed") == "Workflow failed"

    def test_variables_rendered(self, run_context):
        assert run_context.render("{{ execution.id }} has failed") == "exec-42 has failed"

    def test_secret_rendered(self, run_context):
        assert run_context.render("{{ secret('ZENDESK_TOKEN') }}") == "secret-token"

    def test_none_passthrough(self, run_context):
        assert run_context.render(None) is None

    def test_list_rendered_in_order(self, run_context):
        assert run_context.render(["{{ flow }}", "bug", "{{ flow }}"]) == ["billing", "bug", "billing"]

    def test_undefined_variable_fails(self, run_context):
        with pytest.raises(RenderingFailure) as exc_info:
            run_context.render("{{ missing.value }}")
        assert exc_info.value.template == "{{ missing.value }}"

    def test_unknown_secret_fails(self, run_context):
        with pytest.raises(RenderingFailure, match="Unknown secret"):
            run_context.render("{{ secret('NOPE') }}")

    def test_syntax_error_fails(self, run_context):
        with pytest.raises(RenderingFailure):
            run_context.render("{{ execution.id ")


class TestRenderAs:
    """Test RunContext.render_as coercion"""

    def test_enum_by_name(self, run_context):
        assert run_context.render_as("NORMAL", Priority) == Priority.NORMAL

    def test_enum_by_value(self, run_context):
        assert run_context.render_as("incident", TicketType) == TicketType.INCIDENT

    def test_enum_member_passthrough(self):
        assert RunContext().render_as(TicketType.TASK, TicketType) == TicketType.TASK

    def test_enum_from_template(self):
        context = RunContext(variables={"level": "urgent"})
        assert context.render_as("{{ level | upper }}", Priority) == Priority.URGENT

    def test_invalid_enum(self, run_context):
        with pytest.raises(RenderingFailure, match="expected one of: URGENT, HIGH, NORMAL, LOW"):
            run_context.render_as("CRITICAL", Priority)

    def test_int_from_string(self, run_context):
        assert run_context.render_as("17", int) == 17

    def test_int_passthrough(self, run_context):
        assert run_context.render_as(3, int) == 3

    @pytest.mark.parametrize("value", ["abc", "--1", "²", "1.5", ""])
    def test_invalid_int(self, run_context, value):
        with pytest.raises(RenderingFailure, match="Expected an integer"):
            run_context.render_as(value, int)

    def test_negative_int(self, run_context):
        assert run_context.render_as("-7", int) == -7

    def test_none_stays_none(self, run_context):
        assert run_context.render_as(None, Priority) is None
        assert run_context.render_as(None, int) is None
