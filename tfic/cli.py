import argparse
import os
import subprocess
import sys
import time

from .compiler import compile_with_options, get_compilation_stats
from .config.config import VERSION
from .data_structures import CompilationOptions
from .exceptions import CompilationError, TFIError
from .utils import TerminalColors

EPILOG = """examples:
  tfic main.tfi                           # Output: main.js
  tfic --output app.js main.tfi           # Output: app.js
  tfic -o dist/script.js program.tfi      # Output: dist/script.js
  tfic --format --comments script.tfi     # Output: script.js
  tfic -f -c -s -o minified.js app.tfi    # Output: minified.js
"""


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tfic",
        description="Compile a .tfi file into JavaScript and run it with node.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input_file", nargs="?", default="main.tfi", help="Input TFI file (default: main.tfi).")
    parser.add_argument("-o", "--output", dest="output_file", help="Output JavaScript file (default: <input>.js).")
    parser.add_argument("-f", "--format", dest="format_output", action="store_true", help="Format the output JavaScript code.")
    parser.add_argument("-c", "--comments", dest="add_comments", action="store_true", help="Add source comments to the output.")
    parser.add_argument("-s", "--strict", dest="strict_mode", action="store_true", help="Enable strict mode.")
    parser.add_argument("-m", "--minify", dest="minify", action="store_true", help="Minify the output.")
    parser.add_argument("--dump-ast", action="store_true", help="Save the AST as <input>.ast.json next to the input file.")
    parser.add_argument("--no-run", action="store_true", help="Do not execute the generated JavaScript with node.")
    parser.add_argument("-v", "--version", action="version", version=f"TFI Language Compiler v{VERSION}")
    return parser


def default_output_file(input_file: str) -> str:
    """`<stem>.js` in the current directory."""
    stem = os.path.splitext(os.path.basename(input_file))[0]
    return f"{stem}.js"


def run_javascript(output_file: str) -> int:
    """Runs the generated file with node, relaying its output. Returns node's exit status."""
    completed = subprocess.run(["node", output_file], capture_output=True, text=True)
    if completed.stdout:
        print(completed.stdout, end="")
    if completed.stderr:
        print(completed.stderr, end="", file=sys.stderr)
    return completed.returncode


def main(argv=None):
    start_time = time.perf_counter()
    args = build_arg_parser().parse_args(argv)

    # --- Input Validation ---
    if not args.input_file.endswith(".tfi"):
        print(
            f"{TerminalColors.RED}Error: Input file must have a .tfi extension (e.g., main.tfi){TerminalColors.RESET}",
            file=sys.stderr,
        )
        sys.exit(1)

    options = CompilationOptions(
        format_output=args.format_output,
        add_comments=args.add_comments,
        strict_mode=args.strict_mode,
        minify=args.minify,
    )
    output_file = args.output_file or default_output_file(args.input_file)
    exit_code = 0

    try:
        # --- Read Input ---
        with open(args.input_file, "r", encoding="utf-8") as f:
            source = f.read()

        # --- Run Compilation ---
        dump_stages = ["ast"] if args.dump_ast else []
        result = compile_with_options(source, options, file_path=args.input_file, dump_stages=dump_stages)

        # --- Handle Output ---
        output_dir = os.path.dirname(os.path.abspath(output_file))
        os.makedirs(output_dir, exist_ok=True)
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(result.js_code)

        print(f"{TerminalColors.GREEN}Compiled successfully! Output written to: {output_file}{TerminalColors.RESET}")
        if args.dump_ast:
            ast_path = os.path.splitext(os.path.abspath(args.input_file))[0] + ".ast.json"
            print(f"AST written to {ast_path}")

        if result.has_warnings:
            print(f"{TerminalColors.YELLOW}Compilation warnings:", file=sys.stderr)
            for warning in result.warnings:
                print(f"  {warning}", file=sys.stderr)
            print(TerminalColors.RESET, end="", file=sys.stderr)

        print(get_compilation_stats(source).summary())

        # --- Execute ---
        if not args.no_run:
            exit_code = run_javascript(output_file)

    # --- Error Handling ---
    except CompilationError as e:
        print(f"\n{TerminalColors.RED}--- COMPILATION ERROR ({e.stage}) ---\n{e.render()}{TerminalColors.RESET}", file=sys.stderr)
        sys.exit(1)
    except TFIError as e:
        print(f"\n{TerminalColors.RED}--- {e.stage.upper()} ERROR ---\n{e.render()}{TerminalColors.RESET}", file=sys.stderr)
        sys.exit(1)
    except FileNotFoundError as e:
        # Either the input file or the node executable.
        missing = "node" if e.filename == "node" else args.input_file
        print(f"{TerminalColors.RED}ERROR: '{missing}' not found.{TerminalColors.RESET}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"\n{TerminalColors.RED}--- UNEXPECTED COMPILER ERROR ---{TerminalColors.RESET}", file=sys.stderr)
        print("This may be a bug in the compiler. Please report it.", file=sys.stderr)
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        # --- Execution Time ---
        duration = time.perf_counter() - start_time
        print(f"\n{TerminalColors.CYAN}--- Total Execution Time: {duration:.4f} seconds ---{TerminalColors.RESET}")

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
