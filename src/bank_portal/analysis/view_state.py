"""Transient analysis results held by the triage view. Nothing here is persisted."""

from dataclasses import dataclass, field

from bank_portal.exceptions import AnalysisRequestError
from bank_portal.models.analysis import RiskAnalysis
from bank_portal.models.submission import TaskSubmission

from .client import AnalysisClient


def document_contents(submission: TaskSubmission) -> dict[str, str]:
    """Extracted text of every deal and investor document on a submission."""
    contents: dict[str, str] = {}
    contents.update(submission.deal_documents_content or {})
    contents.update(submission.investor_documents_content or {})
    return contents


@dataclass
class AnalysisSession:
    """
    Completed analyses keyed by submission id, then document name, plus the
    last error per document for the retry prompt. Discard with the view.
    """

    results: dict[str, dict[str, RiskAnalysis]] = field(default_factory=dict)
    errors: dict[str, dict[str, str]] = field(default_factory=dict)

    def record(self, submission_id: str, document_name: str, analysis: RiskAnalysis) -> None:
        self.results.setdefault(submission_id, {})[document_name] = analysis
        self.errors.get(submission_id, {}).pop(document_name, None)

    def get(self, submission_id: str, document_name: str) -> RiskAnalysis | None:
        return self.results.get(submission_id, {}).get(document_name)

    def for_submission(self, submission_id: str) -> dict[str, RiskAnalysis]:
        return dict(self.results.get(submission_id, {}))

    def run(
        self, client: AnalysisClient, submission: TaskSubmission, document_name: str
    ) -> RiskAnalysis:
        """
        Analyze one stored document of a submission and keep the result.
        On failure the error message is remembered and the error re-raised.
        """
        contents = document_contents(submission)
        if document_name not in contents:
            raise KeyError(f"No extracted text for {document_name!r} on submission {submission.id}")
        try:
            analysis = client.analyze(document_name, contents[document_name])
        except AnalysisRequestError as e:
            self.errors.setdefault(submission.id, {})[document_name] = str(e)
            raise
        self.record(submission.id, document_name, analysis)
        return analysis
