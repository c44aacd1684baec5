"""CLI for re-running the note analysis over a local collection store"""

import argparse

from loguru import logger

from revolver.config import settings
from revolver.domain.analysis import AIProvider
from revolver.heuristics.provider import HeuristicProvider
from revolver.services.notebook import Notebook
from revolver.stores.local import LocalCollectionStore


def main(
    store_path: str,
    note_ids: list[str] | None = None,
    provider: AIProvider = settings.ai_provider,
) -> dict[str, int]:
    # Setup services
    store = LocalCollectionStore(filepath=store_path)
    notebook = Notebook(
        store=store,
        provider=HeuristicProvider(
            provider,
            max_tags=settings.max_analyze_tags,
            max_related=settings.max_related_notes,
        ),
    )

    known_ids = [note.id for note in store.load().notes]
    targets = known_ids
    if note_ids:
        unknown = [note_id for note_id in note_ids if note_id not in known_ids]
        for note_id in unknown:
            logger.warning(f"Skipping unknown note {note_id}")
        targets = [note_id for note_id in note_ids if note_id in known_ids]

    logger.info(f"Analyzing {len(targets)} notes in {store_path}")

    related_counts = {}
    for note_id in targets:
        analysis = notebook.analyze(note_id)
        related_counts[note_id] = len(analysis.related_notes)

    graph = notebook.build_graph()
    logger.info(f"Graph now has {len(graph.nodes)} nodes and {len(graph.edges)} edges")
    return related_counts


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--store",
        type=str,
        required=False,
        help="Local collection store file",
        default=settings.store_path,
    )
    parser.add_argument(
        "--note-id",
        action="append",
        dest="note_ids",
        help="Note to analyze, may be repeated. Defaults to every note in the store",
    )
    parser.add_argument(
        "--provider",
        type=AIProvider,
        choices=list(AIProvider),
        default=settings.ai_provider,
        help="Provider label stamped on the analyses",
    )

    args = parser.parse_args()

    results = main(store_path=args.store, note_ids=args.note_ids, provider=args.provider)
    for note_id, count in results.items():
        print(f"{note_id}\t{count} related")
