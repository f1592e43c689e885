"""
openai-api API commands - models, complete, moderate, files.

Every command prints the normalized result and exits 0 on Ok, 1 on Error.
"""

import json

from rich.console import Console

from openai_api.endpoints import completions, files, models, moderations
from openai_api.rest import Ok, Result

console = Console()
error_console = Console(stderr=True)


def print_result(result: Result) -> int:
    if isinstance(result, Ok):
        _print_value(console, result.value)
        return 0

    error_console.print("[bold red]✗ Request failed[/bold red]")
    _print_value(error_console, result.value)
    return 1


def _print_value(target: Console, value) -> None:
    if isinstance(value, (dict, list)):
        target.print_json(json.dumps(value, default=str))
    else:
        target.print(value, markup=False)


def cmd_models(args):
    if args.model_id:
        return print_result(models.retrieve(args.model_id))
    return print_result(models.list())


def cmd_complete(args):
    params = {"model": args.model, "prompt": args.prompt}
    if args.max_tokens is not None:
        params["max_tokens"] = args.max_tokens
    if args.temperature is not None:
        params["temperature"] = args.temperature
    return print_result(completions.fetch(params))


def cmd_moderate(args):
    return print_result(moderations.fetch({"input": args.input}))


def cmd_files_list(args):
    return print_result(files.list())


def cmd_files_upload(args):
    try:
        result = files.upload(args.path, {"purpose": args.purpose})
    except FileNotFoundError:
        error_console.print(f"[bold red]✗ File not found:[/bold red] {args.path}")
        return 1
    return print_result(result)


def cmd_files_delete(args):
    return print_result(files.delete(args.file_id))
