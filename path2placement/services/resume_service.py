"""
Resume Service - resume list, upload, analysis and analysis history.

The backend stores each analysis with `result` either as a JSON string
or as an object. normalize_analysis() turns both into the same record.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from path2placement.services.backend_client import BackendClient, get_backend_client
from path2placement.utils.numbers import optional_float

logger = logging.getLogger(__name__)

TREND_LENGTH = 10


def _parse_result(result: Any) -> Dict[str, Any]:
    if isinstance(result, dict):
        return result
    if isinstance(result, str):
        try:
            parsed = json.loads(result)
        except ValueError:
            return {}
        return parsed if isinstance(parsed, dict) else {}
    return {}


def normalize_analysis(row: Dict[str, Any]) -> Dict[str, Any]:
    """
    One history row -> record with parsed result and safe defaults.

    Defaults: score 0, job_role "Unknown Role", resume_path "Unknown Resume",
    created_at now (UTC, ISO format).
    """
    parsed = _parse_result(row.get("result"))
    score = optional_float(parsed.get("score"))
    return {
        "id": row.get("id"),
        "parsed_result": parsed,
        "score": score or 0.0,
        "job_role": row.get("job_role") or parsed.get("job_role") or "Unknown Role",
        "resume_path": row.get("resume_path") or "Unknown Resume",
        "created_at": row.get("created_at") or datetime.now(timezone.utc).isoformat(),
    }


def summarize_history(records: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Average score (1 dp) and score trend.
    `records` are newest first; the trend holds the latest 10, oldest first.
    """
    average = round(sum(r["score"] for r in records) / len(records), 1) if records else 0.0
    trend = [
        {"date": str(r["created_at"])[:10], "score": r["score"]}
        for r in records[:TREND_LENGTH]
    ]
    trend.reverse()
    return {"average_score": average, "score_trend": trend}


def skill_chart(analysis: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Matched skills (matched=1) followed by skill gaps (gap=1)."""
    if not analysis:
        return []
    found = analysis.get("skills_found") or []
    gaps = analysis.get("skill_gaps") or []
    return (
        [{"skill": s, "matched": 1, "gap": 0} for s in found]
        + [{"skill": s, "matched": 0, "gap": 1} for s in gaps]
    )


class ResumeService:
    """
    Resume screens for the logged-in user.
    Every call needs the session token; upload/list also need profile.user.id.
    """

    def __init__(self, client: BackendClient = None):
        self.client = client or get_backend_client()

    def list_resumes(self, user_id: Any, token: str) -> List[Dict[str, Any]]:
        return self.client.list_resumes(user_id, token)

    def upload(self, user_id: Any, filename: str, content: bytes, content_type: str, token: str) -> Dict[str, Any]:
        uploaded = self.client.upload_resume(user_id, filename, content, content_type, token)
        logger.info("Uploaded resume %s for user %s", filename, user_id)
        return uploaded

    def analyze(self, resume_path: str, job_role: str, token: str) -> Dict[str, Any]:
        """
        Run an analysis. Returns the analysis (with publicUrl), its chart rows
        and the stored history record.
        """
        data = self.client.analyze_resume(resume_path, job_role, token)

        analysis = data.get("analysis")
        analysis = dict(analysis) if isinstance(analysis, dict) else {}
        analysis["publicUrl"] = data.get("publicUrl")

        record = data.get("record")
        return {
            "analysis": analysis,
            "skill_chart": skill_chart(analysis),
            "record": normalize_analysis(record) if isinstance(record, dict) else None,
        }

    def history(self, token: str) -> Dict[str, Any]:
        records = [
            normalize_analysis(row)
            for row in self.client.fetch_analyses(token)
            if isinstance(row, dict)
        ]
        summary = summarize_history(records)
        return {
            "analyses": records,
            "average_score": summary["average_score"],
            "score_trend": summary["score_trend"],
            "message": None if records else "No analyses yet.",
        }


def get_resume_service() -> ResumeService:
    return ResumeService()
