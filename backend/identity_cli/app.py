"""Command line interface for the Waypoint identity API."""
from __future__ import annotations

import json
from typing import Optional

import httpx
import typer

from .client import create_client


DEFAULT_API_BASE = "http://localhost:8000"

CATEGORY_CHOICES = ("anime", "manga", "webcomic", "novel")
SOURCE_CHOICES = ("anilist", "mal", "mangadex", "openlibrary")

app = typer.Typer(help="Identify serialized works from page signals via the identity API.")
metadata_app = typer.Typer(help="Look up canonical metadata in external catalogs.")
app.add_typer(metadata_app, name="metadata")


def _api_base_option() -> typer.Option:
    return typer.Option(
        DEFAULT_API_BASE,
        "--api-base",
        help="Base URL for the identity API service.",
        show_default=True,
        envvar="WAYPOINT_API_BASE",
    )


def _validate_choice(value: Optional[str], choices: tuple[str, ...], label: str) -> Optional[str]:
    if value is None:
        return None
    normalized = value.lower()
    if normalized not in choices:
        typer.echo(f"Invalid {label} '{value}'. Choose from: {', '.join(choices)}.", err=True)
        raise typer.Exit(code=1)
    return normalized


def _emit(response: httpx.Response) -> None:
    """Print a JSON body, or the error detail and exit non-zero."""

    if response.status_code >= 400:
        try:
            body = response.json()
        except ValueError:
            body = None
        detail = body.get("detail", response.text) if isinstance(body, dict) else response.text
        typer.echo(f"Request failed ({response.status_code}): {detail}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(response.json(), indent=2, ensure_ascii=False))


@app.command()
def health(api_base: str = _api_base_option()) -> None:
    """Call the /health endpoint and pretty-print the response."""

    with create_client(api_base) as client:
        _emit(client.get("/health"))


@app.command()
def identify(
    url: str = typer.Argument(..., help="Page URL."),
    title: str = typer.Argument(..., help="Page title as displayed by the browser."),
    body_text: str = typer.Option("", "--body-text", help="Optional visible page text."),
    api_base: str = _api_base_option(),
) -> None:
    """Classify a page and extract its clean title and progress."""

    payload = {"url": url, "title": title, "body_text": body_text}
    with create_client(api_base) as client:
        _emit(client.post("/identify", json=payload))


@app.command()
def progress(
    url: str = typer.Argument(..., help="Page URL."),
    title: str = typer.Argument("", help="Page title."),
    category: Optional[str] = typer.Option(
        None,
        "--category",
        help="Media category; omit to use category-agnostic extraction.",
    ),
    api_base: str = _api_base_option(),
) -> None:
    """Extract the chapter or episode a page points at."""

    payload: dict[str, object] = {"url": url, "title": title}
    selected = _validate_choice(category, CATEGORY_CHOICES, "category")
    if selected is not None:
        payload["category"] = selected

    with create_client(api_base) as client:
        _emit(client.post("/identify/progress", json=payload))


@app.command()
def similarity(
    first: str = typer.Argument(..., help="First title."),
    second: str = typer.Argument(..., help="Second title."),
    threshold: Optional[float] = typer.Option(
        None, min=0.0, max=1.0, help="Same-work threshold override."
    ),
    api_base: str = _api_base_option(),
) -> None:
    """Score two titles and report whether they name the same work."""

    params: dict[str, object] = {"a": first, "b": second}
    if threshold is not None:
        params["threshold"] = threshold

    with create_client(api_base) as client:
        _emit(client.get("/similarity", params=params))


@metadata_app.command("search")
def search_metadata(
    title: str = typer.Argument(..., help="Work title to look up."),
    category: str = typer.Option("manga", "--category", help="Media category.", show_default=True),
    api_base: str = _api_base_option(),
) -> None:
    """Run the catalog cascade for a title."""

    selected = _validate_choice(category, CATEGORY_CHOICES, "category")
    with create_client(api_base) as client:
        _emit(client.get("/metadata/search", params={"title": title, "category": selected}))


@metadata_app.command("get")
def get_metadata(
    source: str = typer.Argument(..., help="Catalog name (anilist, mal, mangadex, openlibrary)."),
    record_id: str = typer.Argument(..., help="Record identifier in that catalog."),
    category: str = typer.Option("manga", "--category", help="Media category.", show_default=True),
    api_base: str = _api_base_option(),
) -> None:
    """Fetch a known record directly from one catalog."""

    selected_source = _validate_choice(source, SOURCE_CHOICES, "source")
    selected_category = _validate_choice(category, CATEGORY_CHOICES, "category")
    path = f"/metadata/{selected_source}/{record_id.lstrip('/')}"
    with create_client(api_base) as client:
        _emit(client.get(path, params={"category": selected_category}))


@metadata_app.command("thumbnail")
def check_thumbnail(
    url: str = typer.Argument(..., help="Cover image URL."),
    api_base: str = _api_base_option(),
) -> None:
    """Check whether a cover image URL is reachable."""

    with create_client(api_base) as client:
        _emit(client.post("/metadata/thumbnail", json={"url": url}))
