import os
import sys
import logging
from datetime import datetime
from typing import Optional

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from capacity_assessment.config import settings
from capacity_assessment.core.data_loader import load_catalog
from capacity_assessment.core.export import render_text_report, write_export
from capacity_assessment.core.session_manager import AssessmentSessionManager
from capacity_assessment.labels import ui_text
from capacity_assessment.utils.validation import ValidationError


def setup_logging():
    """Configure application logging"""
    log_level = settings.LOG_LEVEL.upper()
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE) if settings.LOG_FILE else logging.NullHandler()
        ]
    )

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured at {log_level} level")
    return logger


logger = setup_logging()


def ask_option(manager: AssessmentSessionManager) -> Optional[str]:
    """Show the current question and read one command; returns 'quit', 'back' or 'answered'"""
    display = manager.current_question().format_for_display(
        manager.session.current_index, manager.total_questions
    )
    current, total = display["position"], display["total"]
    selected = manager.selected_option()

    print()
    print(ui_text("progress", current=current, total=total))
    print(f"[{display['criterion']}] {ui_text('question', current=current, total=total)}")
    print(display["text"])
    for option in display["options"]:
        marker = "*" if selected == option["index"] else " "
        print(f" {marker} {option['index'] + 1}. {option['text']}")

    raw = input("> ").strip().lower()
    if raw == "q":
        return "quit"
    if raw == "b":
        return "back"
    if raw == "" and selected is not None:
        return "answered"

    try:
        manager.answer(int(raw) - 1)
    except ValueError:
        print(f"Enter a number between 1 and {len(display['options'])}, 'b' for back or 'q' to quit")
        return None
    return "answered"


def run_assessment(manager: AssessmentSessionManager) -> bool:
    while True:
        organization = input(f"{ui_text('organization_prompt')}: ")
        email = input(f"{ui_text('email_prompt')}: ")
        try:
            manager.start(organization, email or None)
            break
        except ValidationError as e:
            print(f"❌ {e}")

    while True:
        command = ask_option(manager)
        if command == "quit":
            return False
        if command == "back":
            manager.back()
        elif command == "answered":
            if manager.can_finish():
                return True
            manager.next()


def main():
    """Main entry point for the console assessment"""

    print("📋 Capacity Assessment")
    print("=" * 60)

    try:
        catalog = load_catalog(settings.CATALOG_FILE)
        manager = AssessmentSessionManager(catalog)

        if catalog.title:
            print(catalog.title)

        if not run_assessment(manager):
            logger.info("Assessment stopped by user")
            return

        report = manager.finish()
        session = manager.session

        print()
        print(render_text_report(report, session.organization_name))

        answer = input("\nSave JSON export? [y/N] ").strip().lower()
        if answer == "y":
            file_name = f"assessment_{datetime.now():%Y%m%d_%H%M%S}.json"
            path = write_export(
                os.path.join(settings.EXPORT_DIR, file_name),
                report, catalog, session.answers,
                session.organization_name, session.user_email
            )
            print(f"💾 Saved to {path}")

    except (KeyboardInterrupt, EOFError):
        logger.info("Application stopped by user")
    except Exception as e:
        logger.error(f"Assessment failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
