"""Build the bash argument list for a single match.

The subject and pattern are interpolated into the script verbatim. The
pattern has to reach bash unquoted for it to be read as a pattern, so no
escaping is done here: callers that pass untrusted input must sanitize it
first, otherwise it can inject arbitrary shell commands.

An empty pattern leaves nothing on the right of "=", which bash rejects as
a syntax error, so match("", "") reports an error rather than a match.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from core.models import SHELL_TOGGLES, MatchOptions


SET_OPTION_FLAG = "-O"
RUN_SCRIPT_FLAG = "-c"

# [[ ... = pattern ]] consults nocasematch, globbing consults nocaseglob
SHOPT_NAMES: Dict[str, Tuple[str, ...]] = {
    "dotglob": ("dotglob",),
    "extglob": ("extglob",),
    "failglob": ("failglob",),
    "globstar": ("globstar",),
    "nocaseglob": ("nocaseglob", "nocasematch"),
    "nullglob": ("nullglob",),
}


def build_script(subject: str, pattern: str) -> str:
    # IFS is set to a literal newline character
    return 'IFS=$"\n"; if [[ "' + subject + '" = ' + pattern + " ]]; then echo true; fi"


def compile_command(subject: str, pattern: str, options: MatchOptions) -> List[str]:
    """Return bash arguments that print "true" iff subject matches pattern.

    Enabled toggles come first as "-O <name>" pairs in SHELL_TOGGLES order,
    followed by "-c <script>".
    """
    args: List[str] = []
    for toggle in SHELL_TOGGLES:
        if not getattr(options, toggle):
            continue
        for shopt_name in SHOPT_NAMES[toggle]:
            args.extend((SET_OPTION_FLAG, shopt_name))

    args.extend((RUN_SCRIPT_FLAG, build_script(subject, pattern)))
    return args
