"""
Meal formatter - Displays a served meal grouped by role.

Output format:
Theme: american
============================================================

  primary:  Cheeseburger
    Grilling a beef patty ...
  side:     Shoestring Fries
    ...
"""

import json
from typing import Dict, List
from .base_formatter import OutputFormatter
from ..models import Meal

ROLE_ORDER = ("primary", "side", "beverage")


class MealFormatter(OutputFormatter):
    """
    Formatter that lists each role of a meal with its preparation.

    Design Pattern: Strategy Pattern implementation
    """

    def __init__(self, output_format: str = "list"):
        """
        Initialize formatter.

        Args:
            output_format: Output format type ('list', 'table', 'json')
        """
        self.output_format = output_format

    def format(self, meal: Meal) -> str:
        """
        Format a meal.

        Args:
            meal: Meal to format

        Returns:
            Formatted output string
        """
        served = meal.serve()

        if self.output_format == "json":
            return self._format_json(meal, served)
        elif self.output_format == "table":
            return self._format_table(meal, served)
        else:  # list (default)
            return self._format_list(meal, served)

    def _format_list(self, meal: Meal, served: Dict[str, str]) -> str:
        """Format as simple list grouped by role"""
        lines = [f"\nTheme: {meal.theme}", "=" * 60]

        items = meal.items()
        for role in ROLE_ORDER:
            lines.append(f"\n  {role + ':':<10}{items[role].name}")
            lines.append(f"    {served[role]}")

        return "\n".join(lines)

    def _format_table(self, meal: Meal, served: Dict[str, str]) -> str:
        """Format as table with theme/role columns"""
        lines: List[str] = []

        lines.append("\n{:<10} {:<10} {:<20} {:<50}".format("THEME", "ROLE", "ITEM", "PREPARATION"))
        lines.append("=" * 90)

        items = meal.items()
        for i, role in enumerate(ROLE_ORDER):
            # Only show theme on first row
            theme_display = meal.theme if i == 0 else ""
            lines.append("{:<10} {:<10} {:<20} {:<50}".format(
                theme_display,
                role,
                items[role].name,
                served[role]
            ))

        return "\n".join(lines)

    def _format_json(self, meal: Meal, served: Dict[str, str]) -> str:
        """Format as JSON keyed by role"""
        items = meal.items()
        output = {
            "theme": meal.theme,
            "items": {
                role: {
                    "name": items[role].name,
                    "type": type(items[role]).__name__,
                    "theme": items[role].theme,
                    "preparation": served[role],
                }
                for role in ROLE_ORDER
            }
        }

        return json.dumps(output, indent=2)
