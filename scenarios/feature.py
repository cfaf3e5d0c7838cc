# scenarios/feature.py
"""
Loading of Gherkin feature files into runnable scenarios.

Parsing is done by the official Gherkin parser and its pickle compiler, so
tags, Background, Rule and Scenario Outline/Examples all work as in any other
cucumber tool. Each compiled pickle becomes one Scenario whose steps already
include the Background steps and the substituted Examples values.
"""
from typing import Dict, List, Optional
from pathlib import Path
import logging
from gherkin.errors import CompositeParserException, ParserError
from gherkin.parser import Parser
from gherkin.pickles.compiler import Compiler
from gherkin.token_scanner import TokenScanner
from pydantic import Field
from utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)

# Pickle step types assigned by the Gherkin compiler
_KEYWORD_BY_TYPE = {
    "Context": "Given",
    "Action": "When",
    "Outcome": "Then",
}


class FeatureSyntaxError(ValueError):
    """A feature file cannot be parsed as Gherkin."""

    def __init__(self, message: str, source: str, line: int):
        super().__init__(f"{source}:{line}: {message}")
        self.source = source
        self.line = line


class Step(ImmutableModel):
    """A single step; keyword is resolved from And/But to Given/When/Then."""
    keyword: str = Field(description="Given, When or Then")
    text: str = Field(description="Step text after the keyword")
    line: int = Field(description="1-based line number in the source")

    def __str__(self) -> str:
        return f"{self.keyword} {self.text}"


class Scenario(ImmutableModel):
    name: str
    line: int
    tags: List[str] = Field(default_factory=list)
    steps: List[Step] = Field(default_factory=list)


class Feature(ImmutableModel):
    name: str
    source: str = "<string>"
    description: str = ""
    tags: List[str] = Field(default_factory=list)
    scenarios: List[Scenario] = Field(default_factory=list)


def _error_line(error: ParserError) -> int:
    if isinstance(error, CompositeParserException) and error.errors:
        error = error.errors[0]
    location = getattr(error, "location", None) or {}
    return location.get("line") or 1


def _index_nodes(children: list, nodes: Dict[str, dict]) -> None:
    """Map AST ids of backgrounds, scenarios and steps to their nodes."""
    for child in children:
        if "rule" in child:
            _index_nodes(child["rule"]["children"], nodes)
            continue
        node = child.get("background") or child.get("scenario")
        if node is None:
            continue
        nodes[node["id"]] = node
        for step in node["steps"]:
            nodes[step["id"]] = step


def _build_steps(pickle: dict, nodes: Dict[str, dict]) -> List[Step]:
    steps: List[Step] = []
    previous: Optional[str] = None
    for pickle_step in pickle["steps"]:
        ast_step = nodes[pickle_step["astNodeIds"][0]]
        keyword = _KEYWORD_BY_TYPE.get(pickle_step.get("type"))
        if keyword is None:
            # Leading And/But/* has no type; keep what was written
            keyword = previous or ast_step["keyword"].strip()
        steps.append(Step(keyword=keyword, text=pickle_step["text"], line=ast_step["location"]["line"]))
        previous = keyword
    return steps


def parse_feature(text: str, source: str = "<string>") -> Feature:
    """
    Parse feature text into a Feature.

    Args:
        text: Contents of a feature file
        source: Name used in error messages (usually the file path)

    Returns:
        The parsed Feature

    Raises:
        FeatureSyntaxError: If the text is not valid Gherkin or has no Feature
    """
    try:
        document = Parser().parse(TokenScanner(text))
    except ParserError as e:
        raise FeatureSyntaxError(str(e), source, _error_line(e)) from e

    feature = document.get("feature")
    if feature is None:
        raise FeatureSyntaxError("Missing 'Feature:' line", source, 1)

    document["uri"] = source
    pickles = Compiler().compile(document)

    nodes: Dict[str, dict] = {}
    _index_nodes(feature["children"], nodes)

    scenarios = [
        Scenario(
            name=pickle["name"],
            line=nodes[pickle["astNodeIds"][0]]["location"]["line"],
            tags=[tag["name"] for tag in pickle["tags"]],
            steps=_build_steps(pickle, nodes),
        )
        for pickle in pickles
    ]

    description = "\n".join(line.strip() for line in (feature.get("description") or "").splitlines()).strip()
    logger.debug(f"Parsed feature '{feature['name']}' with {len(scenarios)} scenarios from {source}")
    return Feature(
        name=feature["name"],
        source=source,
        description=description,
        tags=[tag["name"] for tag in feature["tags"]],
        scenarios=scenarios,
    )


def load_feature(path) -> Feature:
    """Read and parse a feature file."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    return parse_feature(text, source=str(path))
