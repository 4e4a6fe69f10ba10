import argparse
import logging
import sys

from rich.console import Console

from tmpkit.app import TempSpace, create_space
from tmpkit.core.config import settings
from tmpkit.core.errors import TmpkitError

console = Console()


def cmd_file(args, space):
    console.print(space.file(name=args.name, extension=args.extension), soft_wrap=True, highlight=False)


def cmd_directory(args, space):
    console.print(space.directory(), soft_wrap=True, highlight=False)


def cmd_write(args, space):
    content = sys.stdin.read() if args.text == "-" else args.text
    console.print(space.write_sync(content, name=args.name, extension=args.extension), soft_wrap=True, highlight=False)


def build_argparser():
    ap = argparse.ArgumentParser(prog="tmpkit", description="Print unique temporary paths.")
    ap.add_argument("--root", required=False, help="Temp root (default: TMPKIT_ROOT or the system temp dir)")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_f = sub.add_parser("file", help="Print a unique file path (the file is not created)")
    ap_f.add_argument("--name", required=False, help="File name, placed in a unique directory")
    ap_f.add_argument("--extension", required=False, help="Extension for a generated name")
    ap_f.set_defaults(func=cmd_file)

    ap_d = sub.add_parser("directory", help="Create a unique directory and print its path")
    ap_d.set_defaults(func=cmd_directory)

    ap_w = sub.add_parser("write", help="Write TEXT (or stdin with '-') to a unique file")
    ap_w.add_argument("text")
    ap_w.add_argument("--name", required=False)
    ap_w.add_argument("--extension", required=False)
    ap_w.set_defaults(func=cmd_write)

    return ap


def main(argv=None):
    ap = build_argparser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=settings.log_level)
    space = create_space() if args.root is None else TempSpace(root=args.root)
    try:
        args.func(args, space)
    except TmpkitError as e:
        console.print(f"[red]{e}", soft_wrap=True)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
