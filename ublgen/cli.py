import argparse
import json
import sys

from ublgen.config import GeneratorConfig, load_config
from ublgen.exporter import Exporter
from ublgen.loader import load_schemas
from ublgen.log import setup_logging
from ublgen.planner import UnitPlanner


def _resolve_config(args) -> GeneratorConfig:
    config = load_config(args.config) if args.config else GeneratorConfig()
    return config.merged(
        root_namespace=args.root,
        optimize=getattr(args, "optimize", None),
        strict=getattr(args, "strict", None),
        schema_dir=args.schema_dir,
    )


def _build_planner(args) -> UnitPlanner:
    config = _resolve_config(args)
    if config.schema_dir is None:
        raise ValueError("No schema directory given (argument or 'schema_dir' in config).")
    schemas = load_schemas(str(config.schema_dir))
    return UnitPlanner.from_config(schemas, config)


def handle_namespaces(args):
    """Handles the 'namespaces' subcommand: Outputs the XML -> code namespace table."""
    try:
        planner = _build_planner(args)
        print(json.dumps(dict(sorted(planner.table.items())), indent=2))

    except Exception as e:
        print(f"Error building namespace table: {e}", file=sys.stderr)
        sys.exit(1)


def handle_plan(args):
    """Handles the 'plan' subcommand: Resolves every schema into a unit manifest."""
    try:
        planner = _build_planner(args)
        manifest = Exporter.to_manifest(
            planner.plan_all(),
            planner.table,
            planner.root_namespace,
            planner.optimize,
        )

        if args.output:
            if args.format == "yaml":
                Exporter.export_yaml(manifest, args.output)
            else:
                Exporter.export_json(manifest, args.output)
            print(f"✅ Wrote {len(manifest['units'])} units to {args.output}")
        else:
            print(Exporter.dumps(manifest, args.format))

    except Exception as e:
        print(f"Error planning units: {e}", file=sys.stderr)
        sys.exit(1)


def _add_common_arguments(parser):
    parser.add_argument("schema_dir", nargs="?", help="Directory holding the UBL .xsd files.")
    parser.add_argument("--root", help="Root output namespace (default: Ubl).")
    parser.add_argument("--config", help="YAML or JSON configuration file.")


def main():
    parser = argparse.ArgumentParser(
        prog="ublgen",
        description="UblGen CLI - Resolve UBL schema namespaces into code namespaces and imports."
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING).")
    parser.add_argument("--log-json", action="store_true", help="Emit diagnostics as JSON lines.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Subcommand: namespaces
    ns_parser = subparsers.add_parser("namespaces", help="Print the namespace table as JSON.")
    _add_common_arguments(ns_parser)
    ns_parser.set_defaults(func=handle_namespaces)

    # Subcommand: plan
    plan_parser = subparsers.add_parser("plan", help="Resolve every schema into a unit manifest.")
    _add_common_arguments(plan_parser)
    plan_parser.add_argument("--optimize", action=argparse.BooleanOptionalAction, default=None, help="Use the optimized dependency graph (default: from config, else off).")
    plan_parser.add_argument("--strict", action=argparse.BooleanOptionalAction, default=None, help="Fail on unknown XML namespaces (default: from config, else off).")
    plan_parser.add_argument("--format", choices=["json", "yaml"], default="json", help="Manifest format (default: json)")
    plan_parser.add_argument("--output", help="Output file path (default: stdout)")
    plan_parser.set_defaults(func=handle_plan)

    args = parser.parse_args()
    setup_logging(args.log_level, json_format=args.log_json)
    args.func(args)


if __name__ == "__main__":
    main()
