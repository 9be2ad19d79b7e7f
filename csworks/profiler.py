"""Command that instruments srcML files with profiling statements.

The first input must hold ``main``; every input ``foo.cpp.xml`` produces
an instrumented ``p-foo.cpp``.
"""

from __future__ import annotations

import sys
from typing import Optional

from csworks.srcml import SrcML

_USAGE = (
    "Error: Input file(s) are required.\n"
    "       The main must be the first argument followed by "
    "any other .cpp files.  For example:\n"
    "profiler main.cpp.xml file1.cpp.xml file2.cpp.xml\n\n"
)


def derive_names(input_name: str) -> tuple[str, str]:
    """Return the source file name and profile object name for an input file."""
    cut = input_name.find(".xml")
    file_name = input_name if cut < 0 else input_name[:cut]
    return file_name, file_name.replace(".", "_")


def _load(path: str) -> SrcML:
    with open(path, encoding="utf-8", newline="") as handle:
        return SrcML().read(handle)


def _write(file_name: str, code: SrcML) -> None:
    with open("p-" + file_name, "w", encoding="utf-8", newline="") as handle:
        handle.write(f"{code}\n")


def main(argv: Optional[list[str]] = None) -> int:
    """Instrument the given srcML files; the main file comes first."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stderr.write(_USAGE)
        return 1

    names = [derive_names(arg) for arg in args]
    file_names = [file_name for file_name, _ in names]
    profile_names = [profile_name for _, profile_name in names]

    try:
        for index, (input_name, (file_name, profile_name)) in enumerate(zip(args, names)):
            code = _load(input_name)
            if index == 0:
                code.main_header(profile_names, file_names)
                code.main_report(profile_names)
            else:
                code.file_header(profile_name)
            code.function_count(profile_name)
            code.line_count(profile_name)
            _write(file_name, code)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except (ValueError, KeyError) as exc:
        print(f"Error: cannot instrument {input_name}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())