"""This module renders provisioning scripts from request records."""
from .renderer import ScriptRenderer
from .sections import ScriptContext, ScriptSection, ScriptTemplate
from .generator import ScriptGenerator, build_context, check_required_fields, render_script
