import json
from typing import Any, Dict


class JSONReporter:
    """Generates JSON analysis reports"""

    def generate(self, summary: Dict[str, Any], output_path: str):
        """Write the analysis summary to a JSON file"""
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(summary, f, indent=2)

        return summary
