# src/monkey/cli/main.py
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .. import __version__
from ..config import config, DEFAULTS
from ..environment import Environment
from ..evaluator import Evaluator, is_error, recursion_limit
from ..lexer import Lexer
from ..monkey_token import EOF
from ..error_reporter import MonkeySyntaxError
from ..object import Null
from ..parser import Parser

console = Console()


def _setup_logging(debug):
    if not debug:
        return
    config.debug_level = "debug"
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _read_source(file):
    with open(file, 'r', encoding='utf-8') as f:
        return f.read()


def _parse(source_code, filename):
    lexer = Lexer(source_code, filename=filename)
    parser = Parser(lexer)
    program = parser.parse_program()
    return program, parser.errors


def _print_parser_errors(errors, title="Parser Errors:"):
    console.print(f"[bold red]{title}[/bold red]")
    for error in errors:
        console.print(f"  ❌ {escape(error)}")


def _show_result(result):
    if is_error(result):
        console.print(f"[bold red]{escape(result.inspect())}[/bold red]")
    elif not isinstance(result, Null) or config.show_null_results:
        console.print(escape(result.inspect()), highlight=False)


@click.group()
@click.version_option(version=__version__, prog_name="Monkey")
def cli():
    """Monkey Programming Language - a small tree-walking interpreter"""
    pass


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--debug', is_flag=True, help="Log every evaluation step.")
def run(file, debug):
    """Run a Monkey program"""
    _setup_logging(debug)
    program, errors = _parse(_read_source(file), file)

    if errors:
        _print_parser_errors(errors)
        sys.exit(1)

    with recursion_limit():
        result = Evaluator().eval_node(program, Environment.new_global())
    _show_result(result)
    if is_error(result):
        sys.exit(1)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def check(file):
    """Check syntax of a Monkey file"""
    _, errors = _parse(_read_source(file), file)

    if errors:
        _print_parser_errors(errors, title="❌ Syntax Errors Found:")
        sys.exit(1)
    console.print("[bold green]✅ Syntax is valid![/bold green]")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def ast(file):
    """Show AST of a Monkey file"""
    program, errors = _parse(_read_source(file), file)

    if errors:
        _print_parser_errors(errors)
        sys.exit(1)

    body = "\n".join(escape(str(stmt)) for stmt in program.statements)
    console.print(Panel.fit(
        body or "(empty program)",
        title="[bold blue]Abstract Syntax Tree[/bold blue]",
        border_style="blue"
    ))


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def tokens(file):
    """Show tokens of a Monkey file"""
    lexer = Lexer(_read_source(file), filename=file)

    table = Table(title="Tokens")
    table.add_column("Type", style="cyan")
    table.add_column("Literal", style="green")
    table.add_column("Line", style="yellow")
    table.add_column("Column", style="yellow")

    try:
        while True:
            token = lexer.next_token()
            if token.type == EOF:
                break
            table.add_row(escape(token.type), escape(token.literal), str(token.line), str(token.column))
    except MonkeySyntaxError as e:
        console.print(table)
        console.print(f"[bold red]{escape(e.format_error())}[/bold red]")
        sys.exit(1)

    console.print(table)


def _print_env(env):
    table = Table(title="Bindings")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="green")
    for name, value in sorted(env.items()):
        table.add_row(escape(name), escape(value.inspect()))
    console.print(table)


@cli.command()
@click.option('--debug', is_flag=True, help="Log every evaluation step.")
def repl(debug):
    """Start Monkey REPL"""
    _setup_logging(debug)
    env = Environment.new_global()
    evaluator = Evaluator()
    console.print(f"[bold green]Monkey REPL v{__version__}[/bold green]")
    console.print("Type 'exit' to quit, ':env' to list bindings\n")

    while True:
        try:
            code = console.input(f"[bold blue]{escape(config.repl_prompt)}[/bold blue]")
        except (KeyboardInterrupt, EOFError):
            console.print("\n👋 Goodbye!")
            break

        if code.strip() in ['exit', 'quit']:
            break
        if not code.strip():
            continue
        if code.strip() == ':env':
            _print_env(env)
            continue

        program, errors = _parse(code, "<repl>")
        if errors:
            for error in errors:
                console.print(f"[red]Error: {escape(error)}[/red]")
            continue

        with recursion_limit():
            result = evaluator.eval_node(program, env)
        _show_result(result)


@cli.group(name="config")
def config_group():
    """Show or change persistent settings"""
    pass


@config_group.command(name="show")
def config_show():
    """Print the current settings"""
    table = Table(title=f"Config ({config.path})")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    for key, value in sorted(config.items()):
        table.add_row(key, escape(repr(value)))
    console.print(table)


@config_group.command(name="set")
@click.argument('key', type=click.Choice(sorted(DEFAULTS)))
@click.argument('value')
def config_set(key, value):
    """Change a setting and save it"""
    try:
        config.set(key, value)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="VALUE")
    config.save()
    console.print(f"[bold green]✅ {key} = {escape(repr(config.get(key)))}[/bold green]")


@config_group.command(name="reset")
def config_reset():
    """Restore default settings"""
    config.reset()
    config.save()
    console.print("[bold green]✅ Settings restored to defaults[/bold green]")


if __name__ == "__main__":
    cli()
