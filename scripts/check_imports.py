import sys
import importlib.util

def check_required_imports(modules: list[str], pip_extras: str|None = None) -> None:
    """Check if required modules are available and exit with helpful message if not"""
    missing_modules = [ module_name for module_name in modules if importlib.util.find_spec(module_name) is None ]

    if missing_modules:
        print(f"Error: Required modules not found: {', '.join(missing_modules)}")
        if pip_extras:
            print(f"Please run `pip install .[{pip_extras}]`")
        else:
            print("Please run `pip install .`")
        sys.exit(1)
