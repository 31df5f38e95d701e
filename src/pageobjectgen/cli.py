from __future__ import annotations

from dataclasses import replace
import logging
from pathlib import Path
from typing import NoReturn

import click

from . import __version__
from .csharp_writer import build_csharp_page_object
from .dom_extractor import extract_dom_nodes
from .generator import generate_page_elements
from .java_pom_writer import build_java_page_object
from .keywords import SUPPORTED_LANGUAGES, file_extension_for, normalize_language, reserved_words_for
from .models import GenerationResult
from .page_creator import (
    apply_page_preview,
    derive_class_name,
    generate_page_preview,
    normalize_output_path,
    normalize_page_class_name,
)
from .page_fetcher import WAIT_UNTIL_CHOICES, fetch_page_html
from .runtime_checks import is_http_url, normalize_url
from .settings import CONFIG_DIR, CONFIG_PATH, GeneratorSettings, load_settings, save_settings

LOG_FILE_NAME = "generator.log"


def build_logger(log_dir: Path | None = None) -> logging.Logger:
    logger = logging.getLogger("pageobjectgen")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    logger.propagate = False
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    try:
        directory = log_dir or CONFIG_DIR
        directory.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(directory / LOG_FILE_NAME, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError:
        # Fallback to stderr logging if file logger cannot be initialized.
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
    return logger


def render_page_object(
    class_name: str,
    result: GenerationResult,
    settings: GeneratorSettings,
    source_url: str | None = None,
) -> str:
    if settings.language == "java":
        return build_java_page_object(
            class_name,
            result,
            package_name=settings.java_package,
            wait_timeout_seconds=settings.wait_timeout_seconds,
            source_url=source_url,
        )
    return build_csharp_page_object(
        class_name,
        result,
        namespace=settings.namespace,
        wait_timeout_seconds=settings.wait_timeout_seconds,
        source_url=source_url,
    )


def _fail(ctx: click.Context, logger: logging.Logger, message: str) -> NoReturn:
    logger.error(message)
    click.echo(message, err=True)
    ctx.exit(1)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="pageobjectgen")
@click.argument("url")
@click.argument("output_path", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("class_name", required=False)
@click.option(
    "--language",
    type=click.Choice(SUPPORTED_LANGUAGES, case_sensitive=False),
    default=None,
    help="Target language of the generated class (default from config: csharp).",
)
@click.option("--namespace", default=None, help="C# namespace of the generated class.")
@click.option("--package", "java_package", default=None, help="Java package of the generated class.")
@click.option(
    "--html-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Parse a saved HTML file instead of fetching URL.",
)
@click.option("--timeout", "timeout_ms", type=click.IntRange(min=1), default=None, help="Navigation timeout in ms.")
@click.option(
    "--wait-until",
    type=click.Choice(WAIT_UNTIL_CHOICES),
    default=None,
    help="Page load event to wait for before reading the DOM.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (default: ~/.pageobjectgen/config.json).",
)
@click.option("--dry-run", is_flag=True, help="Print the diff without writing the output file.")
@click.option("--save-config", is_flag=True, help="Store the effective options as defaults for later runs.")
@click.pass_context
def cli(
    ctx: click.Context,
    url: str,
    output_path: Path,
    class_name: str | None,
    language: str | None,
    namespace: str | None,
    java_package: str | None,
    html_file: Path | None,
    timeout_ms: int | None,
    wait_until: str | None,
    config_path: Path | None,
    dry_run: bool,
    save_config: bool,
) -> None:
    """Generate a Selenium page object class for the page at URL.

    OUTPUT_PATH is where the class is written; the extension is appended
    when missing. CLASS_NAME defaults to the output file name.

    \b
    Example:
        pageobjectgen https://example.com ./PageObjects/ExamplePage.cs ExamplePage
    """
    logger = build_logger()
    click.echo("--- Selenium Page Object Generator ---")

    if not is_http_url(url):
        _fail(ctx, logger, f"Invalid URL specified: {url}\nURL must start with http:// or https://")
    url = normalize_url(url)

    settings = load_settings(config_path)
    settings = replace(
        settings,
        language=normalize_language(language) if language else settings.language,
        namespace=namespace or settings.namespace,
        java_package=java_package or settings.java_package,
        navigation_timeout_ms=timeout_ms or settings.navigation_timeout_ms,
        wait_until=wait_until or settings.wait_until,
    )
    if save_config:
        saved, error = save_settings(settings, config_path)
        if not saved:
            _fail(ctx, logger, error or "Could not save settings.")
        click.echo(f"Saved settings to {config_path or CONFIG_PATH}")
    reserved_words = reserved_words_for(settings.language)

    if not str(output_path).strip() or not output_path.name:
        _fail(ctx, logger, f"Error processing output path '{output_path}'.")

    if not class_name or not class_name.strip():
        class_name = derive_class_name(output_path)
        click.echo(f"Using generated class name: {class_name}")
    normalized_class_name, error = normalize_page_class_name(class_name, reserved_words)
    if error:
        _fail(ctx, logger, error)

    target_file = normalize_output_path(output_path, file_extension_for(settings.language))
    if target_file != output_path:
        click.echo(f"Appending {target_file.suffix} extension. Output file: {target_file}")

    click.echo(f"Starting generation for URL: {url}")
    click.echo(f"Output class name: {normalized_class_name}")
    click.echo(f"Output file path: {target_file}")
    click.echo("---------------------------------------")

    if html_file is not None:
        try:
            html = html_file.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            _fail(ctx, logger, f"Could not read HTML file '{html_file}': {exc}")
        if not html.strip():
            _fail(ctx, logger, "HTML content is empty.")
        click.echo(f"Loaded HTML from {html_file} ({len(html)} characters).")
    else:
        click.echo(f"Attempting to fetch HTML from: {url}")
        fetched = fetch_page_html(
            url,
            timeout_ms=settings.navigation_timeout_ms,
            wait_until=settings.wait_until,
            user_agent=settings.user_agent,
        )
        if not fetched.ok:
            _fail(ctx, logger, fetched.message)
        click.echo(fetched.message)
        html = fetched.html

    click.echo("Identifying relevant elements...")
    result = generate_page_elements(extract_dom_nodes(html), reserved_words)
    for warning in result.warnings:
        click.echo(f"Warning: {warning}")
    click.echo(f"Found {len(result.elements)} potential elements.")
    if not result.elements:
        click.echo("No relevant elements found to generate locators for.")

    content = render_page_object(normalized_class_name, result, settings, source_url=url)
    preview = generate_page_preview(target_file, content)
    if not preview.ok:
        _fail(ctx, logger, preview.message)

    if dry_run:
        click.echo(preview.diff_text, nl=False)
        click.echo(preview.message)
        return

    ok, message = apply_page_preview(preview)
    if not ok:
        _fail(ctx, logger, message)

    logger.info(message)
    click.echo("---------------------------------------")
    click.echo(message)
    click.echo("IMPORTANT: Review the generated code. Locators might need refinement, especially for dynamic pages.")
