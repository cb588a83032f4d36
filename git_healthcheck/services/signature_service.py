"""Service for auditing the latest commit's signature"""

from typing import Optional, Union, TYPE_CHECKING

from git_healthcheck.constants import SIGNING_SETUP_STEPS
from git_healthcheck.exceptions import GitOperationError
from git_healthcheck.logging_config import get_logger
from git_healthcheck.models.check import Severity, Stage, StageResult
from git_healthcheck.models.signature import SignatureState, SignatureStatus
from git_healthcheck.parsers.signature import classify_signature

if TYPE_CHECKING:
    from git_healthcheck.config import Config
    from git_healthcheck.services.git_service import GitService

logger = get_logger(__name__)


class SignatureService:
    """Reports whether HEAD is signed and, if not, how to set signing up.

    Every outcome is advisory.
    """

    def __init__(self, git_service: "GitService", config: Union["Config", dict]):
        self.git_service = git_service
        self.config = config
        self.evidence_lines = config.get("evidence_lines", 3)

    def get_signature_status(self) -> SignatureStatus:
        if not self.git_service.has_commits():
            return classify_signature(None, has_commits=False)

        text: Optional[str]
        try:
            text = self.git_service.get_signature_output()
        except GitOperationError as e:
            logger.debug(f"Signature output unavailable: {e}")
            text = None
        return classify_signature(text)

    def check(self) -> StageResult:
        result = StageResult(Stage.SIGNATURE)
        status = self.get_signature_status()
        result.data = status
        logger.debug(f"Signature state: {status.state.value}")

        evidence = status.evidence[:self.evidence_lines]
        if status.state == SignatureState.NO_HISTORY:
            result.add(Severity.INFO, "No commits yet; nothing to verify")
        elif status.state == SignatureState.UNKNOWN:
            result.add(Severity.INFO, "Signature verification output unavailable")
        elif status.state == SignatureState.GOOD:
            signer = f" by {status.key_info}" if status.key_info else ""
            result.add(Severity.OK, f"Latest commit has a good signature{signer}", evidence)
        elif status.state == SignatureState.BAD:
            result.add(Severity.WARNING, "Latest commit has a BAD signature", evidence)
        elif status.state == SignatureState.EXPIRED:
            result.add(Severity.WARNING, "Latest commit is signed with an expired key", evidence)
        elif status.state == SignatureState.UNCLEAR:
            result.add(Severity.INFO, "Latest commit is signed but the result is unclear", evidence)
        else:
            self._report_unsigned(result)
        return result

    def _report_unsigned(self, result: StageResult) -> None:
        gpgsign = (self.git_service.get_config_value("commit.gpgsign") or "").lower()
        signing_key = self.git_service.get_config_value("user.signingkey")

        if gpgsign in ("true", "yes", "on", "1"):
            key = signing_key or "the default key"
            result.add(
                Severity.WARNING,
                "Latest commit is not signed",
                [
                    f"commit.gpgsign is enabled (signing key: {key}) but this commit has no signature",
                    "Check whether it was created by a tool that bypasses signing, "
                    "then re-sign with: git commit --amend --no-edit -S",
                ],
            )
        else:
            result.add(
                Severity.WARNING,
                "Latest commit is not signed and commit signing is disabled",
                ["To sign commits automatically:"] + [f"  {step}" for step in SIGNING_SETUP_STEPS],
            )
