"""Bank intake portal: task/meeting intake, triage, and document risk analysis."""

__version__ = "0.1.0"
