"""CLI for renaming the components of an Application manifest file."""
import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from component_naming.core.config import get_settings
from component_naming.core.errors import ComponentNamingError
from component_naming.models.application import Application
from component_naming.naming.contracts import NamingStrategy
from component_naming.naming.mapping_recorder import MappingRecorder
from component_naming.naming.renamer import ComponentRenamer


def _load(path):
    return Application.model_validate(json.loads(Path(path).read_text(encoding="utf-8")))


def cmd_rename(args):
    """Rename components once and print or write the manifest."""
    application = _load(args.file)
    policy = get_settings().naming_policy
    if args.strategy:
        policy = policy.model_copy(update={"strategy": NamingStrategy(args.strategy)})

    result = ComponentRenamer(policy).rename_all(application)
    if not result.modified:
        print(f"{application.name}: components not renamed (already renamed or disabled)", file=sys.stderr)
        output = application
    else:
        output = result.application

    text = json.dumps(output.to_manifest(), indent=2, ensure_ascii=False)
    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
    else:
        print(text)
    return 0


def cmd_mapping(args):
    """Print the recorded component name mapping."""
    application = _load(args.file)
    mapping = MappingRecorder().read(application)
    if mapping is None:
        print(f"{application.name}: no component mapping recorded", file=sys.stderr)
        return 1
    print(json.dumps(mapping, indent=2, sort_keys=True, ensure_ascii=False))
    return 0


def build_parser():
    p = argparse.ArgumentParser(prog="component-naming")
    sub = p.add_subparsers(dest="cmd")
    s = sub.add_parser("rename", help="Rename application components (at most once)")
    s.add_argument("file", help="Application manifest (JSON)")
    s.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in NamingStrategy],
        help="Override the configured naming strategy",
    )
    s.add_argument("--output", "-o", help="Write the manifest here instead of stdout")
    s.set_defaults(func=cmd_rename)
    s = sub.add_parser("mapping", help="Show the recorded original -> new name mapping")
    s.add_argument("file", help="Application manifest (JSON)")
    s.set_defaults(func=cmd_mapping)
    return p


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)
    if not hasattr(args, "func"):
        p.print_help()
        return 2
    try:
        return args.func(args)
    except (OSError, json.JSONDecodeError, ValidationError, ComponentNamingError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
