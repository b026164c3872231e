import ast

from Modules import config_manager


def test_ui_docstring_uses_module_quote_style():
    # Read the source so the test does not need a Qt installation
    source = (config_manager.PROJECT_ROOT / "Modules" / "UI.py").read_text(encoding="utf-8")
    assert source.splitlines()[1].startswith('"""""PySide6 user interface')
    docstring = ast.get_docstring(ast.parse(source))
    assert docstring.lstrip('"').startswith("PySide6 user interface")
