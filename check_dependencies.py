#!/usr/bin/env python
"""
Dependency checker for mcstate.
This script checks if all required dependencies are installed correctly.
"""

import importlib
import sys


def check_dependency(module_name, min_version=None, optional=False):
    """Check if a dependency is installed and meets the minimum version requirement."""
    try:
        module = importlib.import_module(module_name)
        if not min_version:
            status = "✓"
        else:
            if hasattr(module, "__version__"):
                version = module.__version__
                if _version_tuple(version) >= _version_tuple(min_version):
                    status = "✓"
                else:
                    status = f"⚠ (version {version} < {min_version})"
            else:
                status = "? (version unknown)"

        print(f"{module_name:.<30} {status}")
        return True
    except ImportError:
        status = "optional" if optional else "MISSING"
        print(f"{module_name:.<30} {status}")
        return optional


def _version_tuple(version):
    parts = []
    for part in version.split("."):
        digits = "".join(c for c in part if c.isdigit())
        parts.append(int(digits) if digits else 0)
    return tuple(parts)


def check_all_dependencies():
    """Check all required and optional dependencies."""
    print("Checking mcstate dependencies...")
    print("-" * 50)

    all_good = True

    # Core dependencies
    core_deps = [
        ("numpy", "1.24.0"),
        ("tomli", "2.0.0"),
        ("msgpack", None),
    ]

    print("Core dependencies:")
    for dep, version in core_deps:
        if not check_dependency(dep, version):
            all_good = False

    # Monitoring dependencies
    monitoring_deps = [
        ("prometheus_client", None),
    ]

    print("\nMonitoring dependencies:")
    for dep, version in monitoring_deps:
        if not check_dependency(dep, version):
            all_good = False

    # Event loop
    if sys.platform != "win32":
        print("\nEvent loop (optional):")
        check_dependency("uvloop", None, optional=True)

    # Testing and benchmarking dependencies
    testing_deps = [
        ("pytest", "7.3.1"),
        ("matplotlib", "3.7.0"),
        ("psutil", "5.9.0"),
    ]

    print("\nTesting and benchmarking dependencies (optional):")
    for dep, version in testing_deps:
        check_dependency(dep, version, optional=True)

    # Check if the package is importable
    try:
        import mcstate
        print("\nmcstate package is installed.")
    except ImportError:
        print("\nmcstate package is not installed.")
        print("Run: pip install -e .")
        all_good = False

    print("-" * 50)
    if all_good:
        print("All required dependencies are installed correctly!")
    else:
        print("Some dependencies are missing. Please install them using:")
        print("pip install -e .[test]")

    return all_good


if __name__ == "__main__":
    sys.exit(0 if check_all_dependencies() else 1)
