"""Logic for deriving and writing the schemas of every candidate in parallel."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from catalog_schema.build_class_schema import build_class_schema
from catalog_schema.build_shell_schema import build_shell_schema
from catalog_schema.discover_models import Candidate
from catalog_schema.errors import FatalSchemaError, ModelSchemaError
from catalog_schema.load_source_model import load_source_model
from catalog_schema.settings import Settings
from catalog_schema.source_model import ModelOutcome, SourceModel
from catalog_schema.write_json import write_json

logger = logging.getLogger(__name__)


def generate_model(candidate: Candidate, settings: Settings) -> SourceModel:
    """Derive one model's schemas and write them once both are complete."""
    model = load_source_model(candidate.name, candidate.filename, settings)
    class_schema = build_class_schema(model, settings)
    shell = build_shell_schema(model, class_schema, settings) if model.type_id else None

    logger.info("%s%s", model.name.ljust(31), " ".join(class_schema["properties"]))
    if shell is not None:
        write_json(settings.dest / f"{model.name}_type.json", shell, settings.json_indent)
    write_json(settings.dest / f"{model.name}.json", class_schema, settings.json_indent)
    return model


def _process_one(candidate: Candidate, settings: Settings) -> ModelOutcome:
    try:
        model = generate_model(candidate, settings)
    except (ModelSchemaError, OSError) as exc:
        return ModelOutcome(
            candidate.index,
            candidate.name,
            candidate.filename,
            error=f"{type(exc).__name__}: {exc}",
        )
    return ModelOutcome(candidate.index, candidate.name, candidate.filename, model=model)


def generate_models(candidates: list[Candidate], settings: Settings) -> list[ModelOutcome]:
    """Process every candidate and join on all of their outcomes.

    Outcomes are returned in dispatch order. A fatal error cancels the work
    that has not started yet and propagates.
    """
    outcomes: dict[int, ModelOutcome] = {}
    pool = ThreadPoolExecutor(max_workers=settings.workers)
    try:
        futures: dict[Future[ModelOutcome], Candidate] = {
            pool.submit(_process_one, c, settings): c for c in candidates
        }
        for future in as_completed(futures):
            outcome = future.result()
            if not outcome.succeeded:
                logger.error("Fail: %s", outcome.filename)
                logger.error("%s", outcome.error)
            outcomes[outcome.index] = outcome
    except FatalSchemaError:
        pool.shutdown(wait=False, cancel_futures=True)
        raise
    finally:
        # Workers already running finish their own file before we return.
        pool.shutdown()

    if len(outcomes) != len(candidates):
        msg = f"Only {len(outcomes)} of {len(candidates)} models reported back"
        raise RuntimeError(msg)
    return [outcomes[i] for i in sorted(outcomes)]
