"""Point d'entrée du module src. Permet python -m src."""

import argparse
import asyncio
import json
import sys
from typing import Any


def run_api() -> None:
    """Lance l'API FastAPI."""
    import uvicorn

    from src.settings import settings

    print("🌐 Démarrage API FastAPI...")
    uvicorn.run(
        "src.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.reload_enabled,
    )


async def collect_views() -> dict[str, Any]:
    """Fetch the catalog once and return the three views as JSON-ready dicts."""
    from src.api.schemas import views_payload
    from src.services.credits.credit_service import get_credit_service

    service = get_credit_service()
    views = await service.get_views()
    return views_payload(views)


def run_views(view: str | None) -> None:
    """Affiche les vues agrégées en JSON."""
    result = asyncio.run(collect_views())
    if view:
        result = result[view]
    print(json.dumps(result, indent=2, ensure_ascii=False))


def main() -> None:
    """CLI principal."""
    parser = argparse.ArgumentParser(
        description="CastGraph - Agrégation des castings Marvel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exemples:
  python -m src api                                   # API FastAPI
  python -m src views                                 # Les trois vues en JSON
  python -m src views --only moviesPerActor           # Une seule vue
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Commande")

    # API
    subparsers.add_parser("api", help="API FastAPI")

    # Vues
    views_parser = subparsers.add_parser("views", help="Vues agrégées en JSON")
    views_parser.add_argument(
        "--only",
        choices=[
            "moviesPerActor",
            "actorsWithMultipleCharacters",
            "charactersWithMultipleActors",
        ],
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "api":
            run_api()
        elif args.command == "views":
            run_views(args.only)

    except KeyboardInterrupt:
        print("\n⚠️  Interrompu")
        sys.exit(130)
    except Exception as e:
        print(f"\n❌ ERREUR : {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
