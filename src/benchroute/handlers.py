"""Page handlers for the fixed routes.

Every handler takes no arguments and returns the response body.
"""
import importlib.metadata
import os
import platform
import socket
import sys

from benchroute.templating import render_template


def home():
    return "Welcome"


def hostinfo():
    rows = [
        ("Hostname", socket.gethostname()),
        ("Platform", platform.platform()),
        ("Machine", platform.machine()),
        ("CPU count", os.cpu_count()),
        ("Process ID", os.getpid()),
        ("Working directory", os.getcwd()),
    ]
    return render_template("hostinfo.html", title="Host information", rows=rows)


def _installed_distributions():
    seen = {}
    for dist in importlib.metadata.distributions():
        name = dist.metadata.get("Name")
        if name and name.lower() not in seen:
            seen[name.lower()] = (name, dist.version)
    return sorted(seen.values(), key=lambda item: item[0].lower())


def interpreter_info():
    """Describe the running Python interpreter and its installed packages."""
    rows = [
        ("Python version", platform.python_version()),
        ("Implementation", platform.python_implementation()),
        ("Compiler", platform.python_compiler()),
        ("Executable", sys.executable),
        ("Prefix", sys.prefix),
        ("Default encoding", sys.getdefaultencoding()),
        ("Filesystem encoding", sys.getfilesystemencoding()),
    ]
    return render_template(
        "interpreter_info.html",
        title="Interpreter information",
        rows=rows,
        sys_path=list(sys.path),
        distributions=_installed_distributions(),
    )
