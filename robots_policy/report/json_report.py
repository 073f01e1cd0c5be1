# robots_policy/report/json_report.py

"""
Генерация JSON-представления Policy для диагностики.
"""
import json
from pathlib import Path
from typing import Any, Dict

from robots_policy.parser.models import Policy


def policy_to_dict(policy: Policy) -> Dict[str, Any]:
    """Policy -> dict, группы и правила в порядке объявления."""
    return {
        "source_location": policy.source_location,
        "last_refreshed": policy.last_refreshed.isoformat(),
        "allow_all": policy.allow_all,
        "disallow_all": policy.disallow_all,
        "groups": [
            {
                "agents": list(group.agents),
                "rules": [{"path": r.path, "permits": r.permits} for r in group.rules],
            }
            for group in policy.groups
        ],
    }


def render_json(policy: Policy, output_path: Path | str) -> Path:
    """
    Сохраняет policy в формате JSON по указанному пути.

    :param policy: разобранный robots.txt
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open("w", encoding="utf-8") as f:
        json.dump(policy_to_dict(policy), f, ensure_ascii=False, indent=2)

    return output
