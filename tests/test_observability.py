import logging
import unittest

from domain.models import PullRequestSummary
from infrastructure.observability.logging_utils import (
    log_event,
    register_sensitive_values,
    safe_message,
)
from infrastructure.observability.workflow_observer import (
    format_pull_request_heads,
    observe_pull_requests,
    observe_workflow_step,
)


OBSERVER_LOGGER = "infrastructure.observability.workflow_observer"


class WorkflowObserverTests(unittest.TestCase):
    def test_formats_found_pull_request_heads(self) -> None:
        pull_requests = [
            PullRequestSummary(head_label="acme:issue-42"),
            PullRequestSummary(head_label="fork:issue-42"),
        ]

        self.assertEqual(
            format_pull_request_heads(pull_requests),
            'Found pull requests for refs: "acme:issue-42", "fork:issue-42"',
        )

    def test_observe_pull_requests_logs_heads(self) -> None:
        with self.assertLogs(OBSERVER_LOGGER, level="INFO") as captured:
            observe_pull_requests([PullRequestSummary(head_label="acme:issue-42")])

        self.assertEqual(captured.records[0].levelno, logging.INFO)
        self.assertEqual(
            captured.records[0].getMessage(),
            'Found pull requests for refs: "acme:issue-42"',
        )

    def test_fallback_step_logs_warning(self) -> None:
        with self.assertLogs(OBSERVER_LOGGER, level="INFO") as captured:
            observe_workflow_step(
                "create_pull_request",
                "fallback",
                detail="draft creation failed, retrying as non-draft: Bad credentials",
            )

        record = captured.records[0]
        self.assertEqual(record.levelno, logging.WARNING)
        self.assertIn('step="create_pull_request"', record.getMessage())
        self.assertIn("Bad credentials", record.getMessage())

    def test_step_levels_follow_status(self) -> None:
        with self.assertLogs(OBSERVER_LOGGER, level="INFO") as captured:
            observe_workflow_step("create_branch", "success", detail="refs/heads/issue-42")
            observe_workflow_step("create_branch", "error", detail="Reference already exists")

        self.assertEqual(
            [record.levelno for record in captured.records],
            [logging.INFO, logging.ERROR],
        )


class LoggingUtilsTests(unittest.TestCase):
    def test_safe_message_redacts_tokens(self) -> None:
        register_sensitive_values("registered-secret")

        redacted = safe_message(
            "Bearer abc.def ghp_abc123 github_pat_XYZ_9 registered-secret"
        )

        self.assertEqual(redacted, "Bearer [REDACTED] [REDACTED] [REDACTED] [REDACTED]")

    def test_log_event_renders_fields_and_skips_none(self) -> None:
        logger = logging.getLogger("tests.log_event")

        with self.assertLogs(logger, level="INFO") as captured:
            log_event(logger, logging.INFO, "action.run.end", status="success", draft=True, error=None, note='say "hi"')

        self.assertEqual(
            captured.records[0].getMessage(),
            'event=action.run.end status="success" draft="true" note="say \\"hi\\""',
        )


if __name__ == "__main__":
    unittest.main()
