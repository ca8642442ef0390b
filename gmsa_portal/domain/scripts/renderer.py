"""Script renderer (strict placeholder substitution).

PowerShell uses ``$Name`` for its own variables, so only the braced
``${name}`` form is treated as a placeholder. Everything else passes
through verbatim.
"""

from __future__ import annotations

from string import Template
from typing import Mapping


class BracedTemplate(Template):
    """``string.Template`` that substitutes ``${name}`` and nothing else."""

    pattern = r"""
    \$(?:
        (?P<escaped>(?!))                |
        (?P<named>(?!))                  |
        \{(?P<braced>[_a-z][_a-z0-9]*)\} |
        (?P<invalid>(?!))
    )
    """


class ScriptRenderer:
    """Render script fragments with strict placeholder rules."""

    def render(self, template: str, variables: Mapping[str, str]) -> str:
        """Render a script fragment.

        Args:
            template: Fragment containing ${var} placeholders.
            variables: Mapping of variable names to values.

        Returns:
            Rendered fragment.

        Raises:
            ValueError: If any template variables are missing.
        """
        try:
            return BracedTemplate(template).substitute(variables)
        except KeyError as exc:
            raise ValueError(f'Missing script variable: {exc}') from exc
