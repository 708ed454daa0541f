# cc_import_tool/adapters/cli/__init__.py

"""CLI adapter for the CC import tool"""

# Local imports
from cc_import_tool.adapters.cli.main import main
from cc_import_tool.adapters.cli.parser import create_argument_parser
from cc_import_tool.adapters.cli.parser import generate_output_filename

__all__ = ["create_argument_parser", "generate_output_filename", "main"]
