"""
agent-skills command line interface.

Examples:
  agent-skills list
  agent-skills list --plugins
  agent-skills show dapp-builder
  agent-skills read dapp-builder --reference contract-patterns.md
  agent-skills plugin freenet-core-dev
  agent-skills check --strict
  agent-skills export > catalog.yaml
  agent-skills serve --port 5110
"""

import argparse
import logging
import sys
from typing import List, Optional

from agent_skills.config import LOG_LEVELS, get_registry_config, load_environment_variables
from agent_skills.registry import (
    CatalogValidationError,
    SkillRegistry,
    export_catalog_yaml,
    get_catalog_problems,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def cmd_list(registry: SkillRegistry, args) -> int:
    if args.plugins:
        for key in registry.list_plugins():
            plugin = registry.get_plugin(key)
            print(f"{key:25} {', '.join(plugin.skills)}")
    else:
        for key in registry.list_skills():
            skill = registry.get_skill(key)
            print(f"{key:25} {skill.name}")
    return EXIT_OK


def cmd_show(registry: SkillRegistry, args) -> int:
    skill = registry.get_skill(args.skill)
    if skill is None:
        print(f"❌ Unknown skill: {args.skill}", file=sys.stderr)
        return EXIT_FAILURE

    print(f"key:         {args.skill}")
    print(f"name:        {skill.name}")
    print(f"description: {skill.description}")
    print(f"entry:       {registry.get_skill_path(args.skill)}")
    for path in registry.get_reference_paths(args.skill):
        print(f"reference:   {path}")
    return EXIT_OK


def cmd_read(registry: SkillRegistry, args) -> int:
    if args.reference:
        result = registry.load_reference(args.skill, args.reference)
    else:
        result = registry.load_skill(args.skill)

    if result.not_found:
        target = f"reference {args.reference} of " if args.reference else ""
        print(f"❌ Not found: {target}{args.skill}", file=sys.stderr)
        return EXIT_FAILURE
    if result.read_error:
        print(f"❌ Cannot read {result.path}: {result.error}", file=sys.stderr)
        return EXIT_FAILURE

    sys.stdout.write(result.value)
    return EXIT_OK


def cmd_plugin(registry: SkillRegistry, args) -> int:
    plugin = registry.get_plugin(args.plugin)
    if plugin is None:
        print(f"❌ Unknown plugin: {args.plugin}", file=sys.stderr)
        return EXIT_FAILURE

    print(f"{args.plugin}: {plugin.description}")
    for skill in registry.get_plugin_skills(args.plugin):
        print(f"  - {skill.name}: {skill.entry_path}")
    return EXIT_OK


def cmd_check(registry: SkillRegistry, args) -> int:
    problems = get_catalog_problems(registry.catalog)
    if problems:
        for problem in problems:
            print(f"❌ {problem}")
        print(f"{len(problems)} problem(s) found")
        return EXIT_FAILURE

    print(f"✅ {len(registry.list_skills())} skills, {len(registry.list_plugins())} plugins, all files present")
    return EXIT_OK


def cmd_export(registry: SkillRegistry, args) -> int:
    sys.stdout.write(export_catalog_yaml(registry.catalog))
    return EXIT_OK


def cmd_serve(registry: SkillRegistry, args) -> int:
    from agent_skills.app import create_app

    app = create_app(registry)
    app.run(host=args.host, port=args.port)
    return EXIT_OK


def build_parser(config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='agent-skills',
        description='Inspect and serve Freenet agent skills',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split('Examples:', 1)[1] if __doc__ else None
    )
    parser.add_argument('--catalog', default=config['CATALOG_PATH'], help='Catalog YAML file')
    parser.add_argument('--skills-dir', default=config['SKILLS_DIR'], help='Skills root directory')
    parser.add_argument(
        '--strict',
        action='store_true',
        default=config['STRICT'],
        help='Fail when a plugin names an unknown skill'
    )
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS, default=config['LOG_LEVEL'],
                        help='Logging level (default: %(default)s)')

    subparsers = parser.add_subparsers(dest='command', required=True)

    p = subparsers.add_parser('list', help='List skills (or plugins)')
    p.add_argument('--plugins', action='store_true', help='List plugins instead of skills')
    p.set_defaults(func=cmd_list)

    p = subparsers.add_parser('show', help='Show skill metadata and file paths')
    p.add_argument('skill')
    p.set_defaults(func=cmd_show)

    p = subparsers.add_parser('read', help='Print a skill entry file or reference')
    p.add_argument('skill')
    p.add_argument('--reference', help='Reference file name (e.g., contract-patterns.md)')
    p.set_defaults(func=cmd_read)

    p = subparsers.add_parser('plugin', help='Show the skills bundled by a plugin')
    p.add_argument('plugin')
    p.set_defaults(func=cmd_plugin)

    p = subparsers.add_parser('check', help='Verify every referenced file exists')
    p.set_defaults(func=cmd_check)

    p = subparsers.add_parser('export', help='Print the catalog as YAML')
    p.set_defaults(func=cmd_export)

    p = subparsers.add_parser('serve', help='Run the HTTP API')
    p.add_argument('--host', default=config['HOST'])
    p.add_argument('--port', type=int, default=config['PORT'])
    p.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_environment_variables()
    config = get_registry_config()
    args = build_parser(config).parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        registry = SkillRegistry.from_config({
            'CATALOG_PATH': args.catalog,
            'SKILLS_DIR': args.skills_dir,
            'STRICT': args.strict
        })
    except CatalogValidationError as e:
        print(f"❌ Invalid catalog: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return args.func(registry, args)


if __name__ == '__main__':
    sys.exit(main())
