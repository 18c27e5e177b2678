# region ---[ Default CLI Options ]---

DEFAULT_OUTPUT = "wordlist.txt"
DEFAULT_DIRECTORY = ""
DEFAULT_LIST_FILE = ""
DEFAULT_URL = ""
DEFAULT_NO_COLOR = False
DEFAULT_VERBOSE = False

# endregion ---[ Default CLI Options ]---
# region ---[ Scratch Workspace ]---

# Clones land in <tempdir>/jelox-repo/jelo-<uuid4>
SCRATCH_NAMESPACE = "jelox-repo"
SCRATCH_PREFIX = "jelo-"

GIT_LIST_TRACKED = ("ls-tree", "-r", "--name-only", "HEAD")

# endregion ---[ Scratch Workspace ]---
# region ---[ Console ]---

BANNER: list[str] = [
    "     _ _____ _     _____  __",
    "    | | ____| |   / _ \\ \\/ /",
    " _  | |  _| | |  | | | \\  / ",
    "| |_| | |___| |__| |_| /  \\ ",
    " \\___/|_____|_____\\___/_/\\_\\",
]

NO_FILES_NOTICE = "No files found."
NO_ARGS_NOTICE = "No arguments provided, showing help..."

USAGE = """\
Usage: jelox [OPTIONS]
Options:
  -o FILE  Output file (default: wordlist.txt)
  -d DIR   Directory to process
  -l FILE  List file containing repository URLs
  -u URL   Single repository URL to process
  -h       Show help message
  --no-color      Disable colored notices
  -v, --verbose   Log commands and scratch paths
"""

# endregion ---[ Console ]---
