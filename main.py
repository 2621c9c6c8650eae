"""
Terminal entry point
 - Single responsibility: Launch the artwork selection session
 - Imports and calls terminal_ui.app.main()
"""
import sys
from terminal_ui.app import main

if __name__ == "__main__":
    sys.exit(main())
