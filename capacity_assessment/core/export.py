import json
import os
from datetime import datetime
from typing import Any, Dict, List, Optional
import logging

from .answer_store import AnswerStore
from .models import Catalog, Report
from ..labels import level_hint, level_label, ui_text

logger = logging.getLogger(__name__)


def _number(value: float):
    """Render whole-number scores without a trailing .0"""
    return int(value) if float(value).is_integer() else value


def build_export_document(report: Report, catalog: Catalog, answers: AnswerStore,
                          organization_name: str, user_email: Optional[str] = None,
                          generated_at: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Build the JSON export of a finished assessment.

    Every catalog question is listed; unanswered ones carry value 0, the same
    value they were scored with.
    """
    answer_rows: List[Dict[str, Any]] = []
    for position, question in enumerate(catalog.questions):
        stored = answers.get(position)
        answer_rows.append({
            "id": question.id,
            "criterion": question.criterion,
            "question": question.text,
            "value": _number(stored.value) if stored is not None else 0,
        })

    return {
        "organizationName": organization_name,
        "userEmail": user_email,
        "totalScore": _number(report.total_score),
        "totalMax": _number(report.total_max),
        "totalPct": report.total_pct,
        "byCriterion": {
            row.criterion: {
                "score": _number(row.score),
                "maxScore": _number(row.max_score),
                "pct": row.pct,
            }
            for row in report.per_criterion
        },
        "answers": answer_rows,
        "generatedAt": (generated_at or datetime.now()).isoformat(timespec="seconds"),
    }


def export_json(report: Report, catalog: Catalog, answers: AnswerStore,
                organization_name: str, user_email: Optional[str] = None) -> str:
    document = build_export_document(report, catalog, answers, organization_name, user_email)
    return json.dumps(document, ensure_ascii=False, indent=2)


def write_export(file_path: str, report: Report, catalog: Catalog, answers: AnswerStore,
                 organization_name: str, user_email: Optional[str] = None) -> str:
    """Write the JSON export to file_path, creating parent directories"""
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(file_path, 'w', encoding='utf-8') as f:
        f.write(export_json(report, catalog, answers, organization_name, user_email))

    logger.info(f"Exported assessment results to {file_path}")
    return file_path


def render_text_report(report: Report, organization_name: str, language: str = None) -> str:
    """Printable plain-text version of the results page"""
    lines = [
        f"{ui_text('organization', language)}: {organization_name}",
        f"{ui_text('total', language)}: {_number(report.total_score)} / "
        f"{_number(report.total_max)} ({report.total_pct}%)",
        "",
    ]

    header = (
        f"{ui_text('criterion', language):<40} {ui_text('max_score', language):>10} "
        f"{ui_text('score', language):>8} {ui_text('percent', language):>5}  {ui_text('level', language)}"
    )
    lines.append(header)
    lines.append("-" * len(header))
    for row in report.per_criterion:
        lines.append(
            f"{row.criterion:<40} {_number(row.max_score):>10} {_number(row.score):>8} "
            f"{str(row.pct) + '%':>5}  {level_label(row.level, language)}"
        )

    for row in report.per_criterion:
        lines.append("")
        lines.append(f"{ui_text('criterion', language)}: {row.criterion}")
        lines.append(f"{ui_text('level', language)}: {level_label(row.level, language)} ({row.pct}%)")
        lines.append(level_hint(row.level, language))

        if row.recommendations:
            lines.append(f"{ui_text('priority_steps', language)}:")
            for number, rec in enumerate(row.recommendations, start=1):
                lines.append(f"  {number}. {rec.question_id} • {rec.question_text}")
                lines.append(f"     {rec.text}")
        else:
            lines.append(ui_text('no_recommendations', language))

    return "\n".join(lines)
