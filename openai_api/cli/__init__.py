#!/usr/bin/env python3
"""
openai-api CLI - call the OpenAI HTTP API from the shell

Commands:
  Configuration:
    openai-api config init                 Write a config file template
    openai-api config show                 Show resolved defaults (keys masked)
    openai-api config set <key> <value>    Set one config field

  API:
    openai-api models [MODEL_ID]           List or retrieve models
    openai-api complete -m M -p P          Text completion
    openai-api moderate INPUT              Moderation check
    openai-api files list|upload|delete    Manage uploaded files
"""

import argparse
import sys

from openai_api.logger import configure_logging
from openai_api.cli.config import cmd_config_init, cmd_config_show, cmd_config_set
from openai_api.cli.api import (
    cmd_models,
    cmd_complete,
    cmd_moderate,
    cmd_files_list,
    cmd_files_upload,
    cmd_files_delete,
)


def setup_config_parser(subparsers):
    config_parser = subparsers.add_parser('config', help='Manage configuration')
    config_subparsers = config_parser.add_subparsers(dest='config_command', help='Config command')
    config_subparsers.required = True

    init_parser = config_subparsers.add_parser('init', help='Write a config file template')
    init_parser.add_argument('--force', action='store_true', help='Overwrite existing config')
    init_parser.set_defaults(func=cmd_config_init)

    show_parser = config_subparsers.add_parser('show', help='Show resolved defaults')
    show_parser.add_argument('--json', action='store_true', help='Output as JSON')
    show_parser.add_argument('--reveal-keys', action='store_true', help='Show API key values (default: hidden)')
    show_parser.set_defaults(func=cmd_config_show)

    set_parser = config_subparsers.add_parser('set', help='Set a configuration value')
    set_parser.add_argument('key', help='Config key (e.g., api_url, http_options.timeout)')
    set_parser.add_argument('value', help='Value to set')
    set_parser.set_defaults(func=cmd_config_set)


def setup_api_parsers(subparsers):
    models_parser = subparsers.add_parser('models', help='List or retrieve models')
    models_parser.add_argument('model_id', nargs='?', help='Model to retrieve (default: list all)')
    models_parser.set_defaults(func=cmd_models)

    complete_parser = subparsers.add_parser('complete', help='Text completion')
    complete_parser.add_argument('-m', '--model', required=True, help='Model name')
    complete_parser.add_argument('-p', '--prompt', required=True, help='Prompt text')
    complete_parser.add_argument('--max-tokens', type=int, help='Maximum tokens to generate')
    complete_parser.add_argument('--temperature', type=float, help='Sampling temperature')
    complete_parser.set_defaults(func=cmd_complete)

    moderate_parser = subparsers.add_parser('moderate', help='Moderation check')
    moderate_parser.add_argument('input', help='Text to classify')
    moderate_parser.set_defaults(func=cmd_moderate)

    files_parser = subparsers.add_parser('files', help='Manage uploaded files')
    files_subparsers = files_parser.add_subparsers(dest='files_command', help='Files command')
    files_subparsers.required = True

    list_parser = files_subparsers.add_parser('list', help='List uploaded files')
    list_parser.set_defaults(func=cmd_files_list)

    upload_parser = files_subparsers.add_parser('upload', help='Upload a file')
    upload_parser.add_argument('path', help='Local file path')
    upload_parser.add_argument('--purpose', default='fine-tune', help='File purpose (default: fine-tune)')
    upload_parser.set_defaults(func=cmd_files_upload)

    delete_parser = files_subparsers.add_parser('delete', help='Delete an uploaded file')
    delete_parser.add_argument('file_id', help='File ID')
    delete_parser.set_defaults(func=cmd_files_delete)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='openai-api',
        description='Call the OpenAI HTTP API',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  openai-api config init
  openai-api config set azure_deployment_id my-deployment
  openai-api models
  openai-api complete -m gpt-3.5-turbo-instruct -p "Say hi" --max-tokens 16
  openai-api moderate "some text"
  openai-api files upload data.jsonl --purpose fine-tune
"""
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    parser.add_argument('--log-json', action='store_true', help='Log as JSON lines')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')
    subparsers.required = True

    setup_config_parser(subparsers)
    setup_api_parsers(subparsers)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        level="DEBUG" if args.verbose else "WARNING",
        json_output=args.log_json,
    )

    return args.func(args) or 0


if __name__ == "__main__":
    sys.exit(main())
