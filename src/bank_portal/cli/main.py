"""Main CLI entry point."""

import argparse
import json
import sys
from pathlib import Path

from bank_portal.config import Settings
from bank_portal.exceptions import PortalError
from bank_portal.logging_config import configure_logging
from bank_portal.models.submission import MEETING_STATUSES, TASK_STATUSES


def _add_db_arg(parser: argparse.ArgumentParser, settings: Settings) -> None:
    parser.add_argument(
        "--db",
        type=Path,
        default=settings.db_path,
        help=f"Path to local storage database (default: {settings.db_path})",
    )


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bank-portal", description="Bank intake and triage portal")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # suggest
    suggest_parser = subparsers.add_parser("suggest", help="Suggest bank teams for a task description")
    suggest_parser.add_argument("description", help="Brief free-text description of the task")

    # teams
    subparsers.add_parser("teams", help="List all browsable bank teams")

    # extract
    extract_parser = subparsers.add_parser("extract", help="Print the extracted text of PDF files")
    extract_parser.add_argument("files", nargs="+", type=Path)

    # tasks
    tasks_parser = subparsers.add_parser("tasks", help="Submit and triage task requests")
    tasks_sub = tasks_parser.add_subparsers(dest="action", required=True)

    task_submit = tasks_sub.add_parser("submit", help="Submit a task request from a YAML form")
    task_submit.add_argument("--form", type=Path, required=True, help="Path to task form YAML")
    task_submit.add_argument("--team", type=str, default=None, help="Team id (default: top suggestion)")
    task_submit.add_argument("--deal", type=Path, nargs="*", default=[], help="Deal documents")
    task_submit.add_argument("--investor", type=Path, nargs="*", default=[], help="Investor documents")
    _add_db_arg(task_submit, settings)

    task_list = tasks_sub.add_parser("list", help="List task submissions")
    task_list.add_argument("--search", type=str, default="")
    task_list.add_argument("--status", type=str, default="all", choices=["all", *TASK_STATUSES])
    task_list.add_argument("--team", type=str, default="all", help="Team id or 'all'")
    task_list.add_argument("--stats", action="store_true", help="Show counts per status")
    _add_db_arg(task_list, settings)

    task_show = tasks_sub.add_parser("show", help="Show one task with triage insights")
    task_show.add_argument("id")
    _add_db_arg(task_show, settings)

    task_update = tasks_sub.add_parser("update", help="Set status (and note) on a task")
    task_update.add_argument("id")
    task_update.add_argument("status", choices=TASK_STATUSES)
    task_update.add_argument("--note", type=str, default=None)
    _add_db_arg(task_update, settings)

    # meetings
    meetings_parser = subparsers.add_parser("meetings", help="Cash management meeting requests")
    meetings_sub = meetings_parser.add_subparsers(dest="action", required=True)

    meeting_submit = meetings_sub.add_parser("submit", help="Submit a meeting request from a YAML form")
    meeting_submit.add_argument("--form", type=Path, required=True)
    _add_db_arg(meeting_submit, settings)

    meeting_list = meetings_sub.add_parser("list", help="List meeting requests")
    meeting_list.add_argument("--search", type=str, default="")
    meeting_list.add_argument("--status", type=str, default="all", choices=["all", *MEETING_STATUSES])
    meeting_list.add_argument("--stats", action="store_true")
    _add_db_arg(meeting_list, settings)

    meeting_update = meetings_sub.add_parser("update", help="Set status (and note) on a meeting request")
    meeting_update.add_argument("id")
    meeting_update.add_argument("status", choices=MEETING_STATUSES)
    meeting_update.add_argument("--note", type=str, default=None)
    _add_db_arg(meeting_update, settings)

    # analyze
    analyze_parser = subparsers.add_parser("analyze", help="Risk-analyze a stored task document")
    analyze_parser.add_argument("id", help="Task submission id")
    analyze_parser.add_argument("document", help="Document file name on the submission")
    analyze_parser.add_argument("--api-url", type=str, default=settings.api_url)
    _add_db_arg(analyze_parser, settings)

    # session
    session_parser = subparsers.add_parser("session", help="Demo sign-in state and active role")
    session_parser.add_argument("action", choices=["show", "login", "logout", "role"])
    session_parser.add_argument("role", nargs="?", choices=["client", "employee"])
    _add_db_arg(session_parser, settings)

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse args and dispatch to subcommands."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    parser = _build_parser(settings)
    args = parser.parse_args(argv)

    handlers = {
        "suggest": _run_suggest,
        "teams": _run_teams,
        "extract": _run_extract,
        "tasks": _run_tasks,
        "meetings": _run_meetings,
        "analyze": _run_analyze,
        "session": _run_session,
        "serve": _run_serve,
    }
    try:
        handlers[args.command](args)
    except PortalError as e:
        raise SystemExit(str(e))


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, default=str))


def _run_suggest(args: argparse.Namespace) -> None:
    from bank_portal.teams import explain_suggestions

    suggestions = explain_suggestions(args.description)
    for i, s in enumerate(suggestions):
        marker = "*" if i == 0 else " "
        print(f"{marker} {s.team.id:<16} {s.team.confidence:>3}%  {s.team.name}  ({s.explanation})")


def _run_teams(args: argparse.Namespace) -> None:
    from bank_portal.teams import all_teams

    _print_json([t.to_json_dict() for t in all_teams()])


def _run_extract(args: argparse.Namespace) -> None:
    from bank_portal.documents import UploadedFile, extract_uploads

    uploads = [UploadedFile.from_path(p) for p in args.files]
    contents = extract_uploads(uploads)
    for upload in uploads:
        if upload.name not in contents:
            print(f"[{upload.name}] skipped (not a PDF: {upload.mime_type})", file=sys.stderr)
            continue
        print(f"[{upload.name}]")
        print(contents[upload.name])


def _run_tasks(args: argparse.Namespace) -> None:
    from bank_portal.store import LocalStorage, TaskSubmissionStore

    store = TaskSubmissionStore(LocalStorage(args.db))

    if args.action == "submit":
        from bank_portal.documents import UploadedFile, extract_uploads
        from bank_portal.models.forms import TaskIntakeForm
        from bank_portal.store import next_submission_id
        from bank_portal.teams import resolve_team

        form = TaskIntakeForm.from_yaml(args.form)
        try:
            team = resolve_team(form.brief_description, args.team or form.team)
        except ValueError as e:
            raise SystemExit(str(e))
        deal = [UploadedFile.from_path(p) for p in args.deal]
        investor = [UploadedFile.from_path(p) for p in args.investor]
        submission = form.to_submission(
            next_submission_id(store.ids()),
            team,
            deal_documents=extract_uploads(deal),
            investor_documents=extract_uploads(investor),
            deal_names=[u.name for u in deal],
            investor_names=[u.name for u in investor],
        )
        store.append(submission)
        print(f"Submitted task {submission.id} to {team.name}")
    elif args.action == "list":
        from bank_portal.triage import filter_tasks, status_counts

        records = store.load_all()
        if args.stats:
            _print_status_counts(status_counts(records, TASK_STATUSES))
        for r in filter_tasks(records, args.search, args.status, args.team):
            print(
                f"{r.id}  [{r.status:<9}] {r.company_name} / {r.contact_person}"
                f"  -> {r.selected_group.name}  ({r.submitted_at:%Y-%m-%d %H:%M})"
            )
    elif args.action == "show":
        from bank_portal.triage import assess_submission

        record = store.get(args.id)
        if record is None:
            raise SystemExit(f"No task submission {args.id}")
        data = record.to_json_dict()
        for key in ("dealDocumentsContent", "investorDocumentsContent"):
            data[key] = {name: f"{len(text)} chars" for name, text in (data.get(key) or {}).items()}
        data["insights"] = assess_submission(record).model_dump()
        _print_json(data)
    elif args.action == "update":
        before = store.ids()
        store.update_status(args.id, args.status, args.note)
        if args.id not in before:
            raise SystemExit(f"No task submission {args.id}")
        print(f"Task {args.id} set to {args.status}")


def _run_meetings(args: argparse.Namespace) -> None:
    from bank_portal.store import LocalStorage, MeetingSubmissionStore

    store = MeetingSubmissionStore(LocalStorage(args.db))

    if args.action == "submit":
        from bank_portal.models.forms import MeetingIntakeForm
        from bank_portal.store import next_submission_id

        form = MeetingIntakeForm.from_yaml(args.form)
        submission = form.to_submission(next_submission_id(store.ids()))
        store.append(submission)
        print(f"Submitted meeting request {submission.id} for {submission.company_name}")
    elif args.action == "list":
        from bank_portal.triage import document_count, filter_meetings, status_counts

        records = store.load_all()
        if args.stats:
            _print_status_counts(status_counts(records, MEETING_STATUSES))
        for r in filter_meetings(records, args.search, args.status):
            print(
                f"{r.id}  [{r.status:<9}] {r.company_name} / {r.contact_person}"
                f"  meeting={r.meeting_date or '-'}  docs={document_count(r)}"
            )
    elif args.action == "update":
        before = store.ids()
        store.update_status(args.id, args.status, args.note)
        if args.id not in before:
            raise SystemExit(f"No meeting request {args.id}")
        print(f"Meeting request {args.id} set to {args.status}")


def _print_status_counts(counts: dict[str, int]) -> None:
    total = counts.pop("total")
    print(f"--- {total} total: " + ", ".join(f"{s} {n}" for s, n in counts.items()) + " ---")


def _run_analyze(args: argparse.Namespace) -> None:
    from bank_portal.analysis import AnalysisClient, AnalysisSession
    from bank_portal.store import LocalStorage, TaskSubmissionStore

    record = TaskSubmissionStore(LocalStorage(args.db)).get(args.id)
    if record is None:
        raise SystemExit(f"No task submission {args.id}")
    client = AnalysisClient(args.api_url)
    try:
        analysis = AnalysisSession().run(client, record, args.document)
    except KeyError as e:
        raise SystemExit(e.args[0])
    finally:
        client.close()
    _print_json(analysis.to_json_dict())


def _run_session(args: argparse.Namespace) -> None:
    from bank_portal.session import SessionState
    from bank_portal.store import LocalStorage

    storage = LocalStorage(args.db)
    state = SessionState.load(storage)
    if args.action == "login":
        state.login()
    elif args.action == "logout":
        state.logout()
    elif args.action == "role":
        if not args.role:
            raise SystemExit("session role requires client or employee")
        state.switch_role(args.role)
    if args.action != "show":
        state.save(storage)
    print(f"authenticated={str(state.is_authenticated).lower()} role={state.role}")


def _run_serve(args: argparse.Namespace) -> None:
    import uvicorn

    from bank_portal.api import create_app

    uvicorn.run(create_app(), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
