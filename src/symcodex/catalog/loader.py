"""
Catalog Loader — построение дерева модулей из pre-parsed таблицы

Вход — последовательность top-level элементов (name, Module | Symbol),
mapping name -> элемент, либо JSON документ каталога. Элементы могут быть
уже построенными моделями или сырыми dict (строки таблицы).

Порядок построения:
1. Нормализация строк (имя из ключа, вывод `kind`, если не указан).
2. JSON Schema контракт для сырых строк (CatalogConfig.validate_schema).
3. Pydantic валидация модели корня: инварианты символов и модулей.
4. Опционально — проверка ничьих best-match (CatalogConfig.reject_ambiguous).

Любая ошибка превращается в CatalogInvariantViolation; частично
построенное дерево наружу не отдаётся.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Union

from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from symcodex.core.contracts import CatalogValidator, format_validation_error
from symcodex.core.domain import Module, Symbol
from symcodex.core.errors import CatalogInvariantViolation, InvalidModifier


logger = logging.getLogger(__name__)

CATALOG_SCHEMA_VERSION = "1"

RawEntry = Union[Symbol, Module, Mapping[str, Any]]
CatalogInput = Union[
    Mapping[str, RawEntry],
    Iterable[tuple[str, RawEntry]],
    Iterable[Mapping[str, Any]],
]


@dataclass(frozen=True)
class CatalogConfig:
    """Конфигурация построения каталога."""

    validate_schema: bool = True  # JSON Schema контракт для сырых строк
    reject_ambiguous: bool = False  # запрет ничьих best-match на этапе построения


# =============================================================================
# NORMALIZATION
# =============================================================================


def _infer_kind(row: Mapping[str, Any]) -> dict[str, Any]:
    """Копия строки с явным `kind` (рекурсивно для модулей)."""
    data = dict(row)
    if "kind" not in data:
        if "variants" in data:
            data["kind"] = "symbol"
        elif "entries" in data:
            data["kind"] = "module"
    if data.get("kind") == "module" and isinstance(data.get("entries"), list):
        data["entries"] = [
            _infer_kind(child) if isinstance(child, Mapping) else child
            for child in data["entries"]
        ]
    return data


def _normalize_entry(name: str, entry: RawEntry) -> RawEntry:
    if isinstance(entry, (Symbol, Module)):
        if entry.name != name:
            return entry.model_copy(update={"name": name})
        return entry
    if isinstance(entry, Mapping):
        return _infer_kind({**entry, "name": name})
    raise CatalogInvariantViolation(f"unsupported entry type {type(entry).__name__}", name)


def normalize_entries(entries: CatalogInput) -> list[RawEntry]:
    """
    Приведение входа к списку top-level элементов.

    Args:
        entries: mapping name -> элемент, пары (name, элемент) или строки с "name"

    Returns:
        Список моделей и/или сырых dict с заполненными name и kind
    """
    if isinstance(entries, Mapping):
        return [_normalize_entry(name, entry) for name, entry in entries.items()]

    normalized: list[RawEntry] = []
    for item in entries:
        if isinstance(item, (Symbol, Module)):
            normalized.append(item)
        elif isinstance(item, Mapping):
            if "name" not in item:
                raise CatalogInvariantViolation("catalog row without a name")
            normalized.append(_infer_kind(item))
        elif isinstance(item, tuple) and len(item) == 2:
            name, entry = item
            normalized.append(_normalize_entry(name, entry))
        else:
            raise CatalogInvariantViolation(f"unsupported catalog row: {item!r}")
    return normalized


# =============================================================================
# BUILD
# =============================================================================


def _check_schema(rows: list[RawEntry], source: str) -> None:
    raw = [row for row in rows if isinstance(row, Mapping)]
    if not raw:
        return
    document = {"schema_version": CATALOG_SCHEMA_VERSION, "entries": raw}
    errors = sorted(
        CatalogValidator().iter_errors(document),
        key=lambda e: [str(part) for part in e.absolute_path],
    )
    if errors:
        details = "; ".join(format_validation_error(e) for e in errors[:5])
        raise CatalogInvariantViolation(f"catalog does not match schema: {details}", source)


def _check_ambiguities(root: Module, source: str) -> None:
    problems: list[str] = []
    for path, symbol in root.walk():
        for query in symbol.ambiguities():
            problems.append(f"{path}.{query.dotted(symbol.modifier_order)}")
    if problems:
        raise CatalogInvariantViolation(
            f"ambiguous best-match for {', '.join(problems)}", source
        )


def build_catalog(
    entries: CatalogInput,
    config: CatalogConfig | None = None,
    source: str = "<memory>",
) -> Module:
    """
    Построение корневого модуля каталога.

    Args:
        entries: Top-level элементы каталога
        config: Параметры проверки (по умолчанию CatalogConfig())
        source: Описание источника для сообщений об ошибках и логов

    Returns:
        Неизменяемый корневой Module (name == "")

    Raises:
        CatalogInvariantViolation: Каталог нарушает контракт или инварианты
    """
    config = config or CatalogConfig()
    rows = normalize_entries(entries)

    if config.validate_schema:
        _check_schema(rows, source)

    try:
        root = Module.model_validate({"name": "", "entries": rows})
    except ValidationError as e:
        raise CatalogInvariantViolation(str(e), source) from e
    except (CatalogInvariantViolation, InvalidModifier) as e:
        raise CatalogInvariantViolation(str(e), source) from e

    if config.reject_ambiguous:
        _check_ambiguities(root, source)

    modules, symbols = root.count()
    logger.info(f"Loaded catalog {source}: {modules} modules, {symbols} symbols")
    return root


def build_catalog_from_document(
    document: Mapping[str, Any],
    config: CatalogConfig | None = None,
    source: str = "<memory>",
) -> Module:
    """
    Построение из JSON документа ({"schema_version": "1", "entries": [...]}).

    Raises:
        CatalogInvariantViolation: Документ не соответствует контракту
    """
    config = config or CatalogConfig()
    if config.validate_schema:
        try:
            CatalogValidator().validate(dict(document))
        except SchemaValidationError as e:
            raise CatalogInvariantViolation(format_validation_error(e), source) from e
    elif document.get("schema_version") != CATALOG_SCHEMA_VERSION:
        raise CatalogInvariantViolation(
            f"unsupported schema_version {document.get('schema_version')!r}", source
        )

    entries = document.get("entries")
    if not isinstance(entries, list):
        raise CatalogInvariantViolation("'entries' must be a list", source)

    # Документ уже проверен целиком
    return build_catalog(
        entries,
        CatalogConfig(validate_schema=False, reject_ambiguous=config.reject_ambiguous),
        source,
    )


def load_catalog(path: Path | str, config: CatalogConfig | None = None) -> Module:
    """
    Загрузка каталога из JSON файла.

    Raises:
        FileNotFoundError: Если файл не существует
        CatalogInvariantViolation: Файл не является валидным каталогом
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            document = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogInvariantViolation(f"invalid JSON: {e}", str(path)) from e

    if not isinstance(document, Mapping):
        raise CatalogInvariantViolation("catalog document must be a JSON object", str(path))

    return build_catalog_from_document(document, config, source=str(path))
