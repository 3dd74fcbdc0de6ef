"""Simple entrypoint to exercise the chromatic engine locally."""

from chromatic_app.app import ChromaticEngineApp
from models.color import DominantColor


def main() -> None:
    app = ChromaticEngineApp()
    seasons = app.init()
    print(f"Loaded {len(seasons)} seasons")
    sample = [DominantColor(hex="#000080", name="Marinho", percentage=0.9)]
    print("winter-cool:", app.classify(dominant_colors=sample, season_id="winter-cool"))


if __name__ == "__main__":
    main()
