# === FILE: robots_policy/cli.py ===
#!/usr/bin/env python3
"""
Точка входа robots-policy: проверка доступа по robots.txt из командной строки.

Команды:
  check SOURCE URL   Проверить, можно ли агенту загрузить URL (exit 0 - можно, 2 - нельзя)
  show SOURCE        Показать разобранный robots.txt (или сохранить JSON)
  config             Показать текущую конфигурацию

SOURCE - URL robots.txt (http/https) или путь к локальному файлу.

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Пример:
  robots-policy check https://en.wikipedia.org/robots.txt https://en.wikipedia.org/wiki/User --agent ia_archiver
"""
import asyncio
import sys
from pathlib import Path

import click

from robots_policy import __version__
from robots_policy.config import RetrieverConfig, load_config
from robots_policy.logger import DEFAULT_FORMAT, init_logging
from robots_policy.matcher import can_fetch
from robots_policy.parser.models import Policy
from robots_policy.report.json_report import render_json
from robots_policy.retriever import fetch_robots, is_remote, load_file

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])

EXIT_DISALLOWED = 2


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _load_policy(source: str, cfg: RetrieverConfig) -> Policy:
    """Загружает robots.txt по URL или из файла; ошибки -> print_error."""
    try:
        if is_remote(source):
            return asyncio.run(
                fetch_robots(source, user_agent=cfg.user_agent, timeout=cfg.timeout)
            )
        return load_file(source)
    except Exception as e:
        print_error(f'Ошибка загрузки robots.txt: {e}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='robots-policy, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд robots-policy CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.argument('source')
@click.argument('url')
@click.option(
    '--agent', '-a', 'agent',
    default=None,
    help='User-Agent для проверки (по умолчанию из конфига)'
)
@click.pass_context
def check(ctx, source, url, agent):
    """Проверить, разрешена ли загрузка URL для агента."""
    cfg = ctx.obj['config']
    policy = _load_policy(source, cfg)
    allowed = can_fetch(policy, agent or cfg.user_agent, url)
    click.echo('allowed' if allowed else 'disallowed')
    if not allowed:
        ctx.exit(EXIT_DISALLOWED)


@cli.command('show', context_settings=CONTEXT_SETTINGS)
@click.argument('source')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-представление в файл'
)
@click.pass_context
def show(ctx, source, json_output):
    """Показать группы и правила robots.txt."""
    policy = _load_policy(source, ctx.obj['config'])

    if json_output:
        try:
            saved = render_json(policy, json_output)
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')
        click.echo(f'JSON report: {saved}')
        return

    if policy.disallow_all:
        click.echo('# everything disallowed')
    elif policy.allow_all:
        click.echo('# everything allowed')
    click.echo(str(policy), nl=False)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
