import argparse
import os
import shutil

from fieldgen.execution.config_executor import OUTPUT_FORMATS, ConfigExecutor
from fieldgen.utils.exceptions import FieldGenError


class C:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    BLUE = "\033[34m"


def cprint(text: str, color: str = C.RESET, bold: bool = False):
    prefix = (C.BOLD if bold else "") + color
    print(f"{prefix}{text}{C.RESET}")


def _clean_output_dir(path: str) -> None:
    if not os.path.isdir(path):
        return
    for name in os.listdir(path):
        full = os.path.join(path, name)
        if os.path.isfile(full) or os.path.islink(full):
            os.remove(full)
        elif os.path.isdir(full):
            shutil.rmtree(full)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Column → struct field generator")

    parser.add_argument("--config", required=True, help="Path to YAML generation config")
    parser.add_argument("--output-dir", default="artifacts")
    parser.add_argument(
        "--format",
        default="ALL_FORMATS",
        choices=list(OUTPUT_FORMATS),
        help="Output format",
    )
    parser.add_argument("--clean-output-dir", action="store_true")
    parser.add_argument("--user-id", default="cli_user")

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.clean_output_dir:
        _clean_output_dir(args.output_dir)

    try:
        cprint("\n[START] Field generation started", C.BLUE, bold=True)
        cprint(f"[INFO] Config={args.config}  Format={args.format}", C.DIM)

        executor = ConfigExecutor(args.config, user_id=args.user_id)
        result = executor.execute(output_dir=args.output_dir, output_format=args.format)

        for table_name, fields in result["tables"].items():
            cprint(f"[TABLE] {table_name}: {len(fields)} fields", C.DIM)

        cprint(f"\n[DONE] Artifacts written to: {args.output_dir}", C.GREEN, bold=True)

    except FieldGenError as e:
        cprint("\n[FAILED] Field generation failed.", C.RED, bold=True)
        cprint(str(e), C.RED)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
