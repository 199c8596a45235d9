#!/usr/bin/env python3
"""
Entry point for running scripts package as a module.
This allows: python -m scripts <command>
"""
import sys
from pathlib import Path

# Ensure project root is in path
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

COMMANDS = ("generate_contract_pdf", "inspect_contract_template")

# Import and run based on command line arguments
if len(sys.argv) > 1 and sys.argv[1] == "generate_contract_pdf":
    from scripts.generate_contract_pdf import main
elif len(sys.argv) > 1 and sys.argv[1] == "inspect_contract_template":
    from scripts.inspect_contract_template import main
else:
    print(f"Usage: python -m scripts {{{'|'.join(COMMANDS)}}} [options]")
    sys.exit(1)

# Remove the subcommand from argv so argparse works correctly
sys.argv.pop(1)
sys.exit(main())
