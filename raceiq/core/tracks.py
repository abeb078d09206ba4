# Track catalog
# FORBIDDEN: logging, any I/O

from typing import Dict, List, Optional

from .types import Corner, Sector, Track


TRACKS: Dict[str, Track] = {
    "monaco": Track(
        name="Monaco Grand Prix",
        length=3.337,
        turns=19,
        lap_record=70.246,
        sectors=(
            Sector(1, 1.2, (1, 2, 3, 4, 5, 6), 23.5),
            Sector(2, 1.1, (7, 8, 9, 10, 11, 12), 22.8),
            Sector(3, 1.037, (13, 14, 15, 16, 17, 18, 19), 23.9),
        ),
        corners=(
            Corner(1, "Sainte Devote", "slow", 180, 120, 3, True, 2.1),
            Corner(2, "Massenet", "medium", 160, 140, 4, False, 1.8),
            Corner(3, "Casino Square", "fast", 200, 180, 5, False, 1.5),
            Corner(4, "Mirabeau", "slow", 140, 80, 2, True, 2.8),
            Corner(5, "Grand Hotel", "slow", 100, 90, 3, False, 2.2),
            Corner(6, "Fairmont", "slow", 120, 100, 3, True, 2.5),
            Corner(7, "Tunnel", "fast", 280, 260, 7, False, 1.2),
            Corner(8, "Chicane", "slow", 180, 120, 3, True, 3.2),
            Corner(9, "Tabac", "medium", 160, 140, 4, False, 1.9),
            Corner(10, "Swimming Pool", "slow", 120, 100, 3, True, 2.7),
        ),
    ),
    "silverstone": Track(
        name="Silverstone",
        length=5.891,
        turns=18,
        lap_record=85.351,
        sectors=(
            Sector(1, 2.1, (1, 2, 3, 4, 5, 6), 28.2),
            Sector(2, 2.0, (7, 8, 9, 10, 11, 12), 27.8),
            Sector(3, 1.791, (13, 14, 15, 16, 17, 18), 29.3),
        ),
        corners=(
            Corner(1, "Abbey", "fast", 300, 280, 7, True, 2.5),
            Corner(2, "Farm Curve", "fast", 280, 260, 6, False, 2.1),
            Corner(3, "Village", "medium", 220, 180, 5, True, 2.8),
            Corner(4, "The Loop", "slow", 160, 120, 3, True, 3.1),
            Corner(5, "Aintree", "medium", 200, 170, 4, False, 2.3),
            Corner(6, "Wellington Straight", "fast", 320, 310, 8, False, 1.1),
            Corner(7, "Brooklands", "slow", 180, 140, 4, True, 2.9),
            Corner(8, "Luffield", "slow", 140, 110, 3, True, 3.2),
            Corner(9, "Woodcote", "fast", 280, 250, 6, False, 1.8),
            Corner(10, "Copse", "fast", 310, 290, 7, False, 2.2),
        ),
    ),
    "monza": Track(
        name="Monza",
        length=5.793,
        turns=11,
        lap_record=79.119,
        sectors=(
            Sector(1, 2.2, (1, 2, 3, 4), 25.8),
            Sector(2, 1.8, (5, 6, 7), 24.2),
            Sector(3, 1.793, (8, 9, 10, 11), 29.1),
        ),
        corners=(
            Corner(1, "Prima Variante", "slow", 340, 120, 2, True, 4.2),
            Corner(2, "Seconda Variante", "slow", 280, 140, 3, True, 3.8),
            Corner(3, "Lesmo 1", "medium", 220, 180, 4, True, 2.5),
            Corner(4, "Lesmo 2", "medium", 200, 160, 4, False, 2.3),
            Corner(5, "Ascari", "medium", 240, 180, 5, True, 2.7),
            Corner(6, "Parabolica", "fast", 320, 280, 6, True, 2.1),
        ),
    ),
    "spa": Track(
        name="Spa-Francorchamps",
        length=7.004,
        turns=19,
        lap_record=103.003,
        sectors=(
            Sector(1, 2.8, (1, 2, 3, 4, 5, 6), 32.1),
            Sector(2, 2.2, (7, 8, 9, 10, 11, 12), 28.9),
            Sector(3, 2.004, (13, 14, 15, 16, 17, 18, 19), 42.0),
        ),
        corners=(
            Corner(1, "La Source", "slow", 280, 120, 2, True, 3.5),
            Corner(2, "Eau Rouge", "fast", 300, 320, 7, False, 3.8),
            Corner(3, "Raidillon", "fast", 320, 310, 8, False, 2.9),
            Corner(4, "Les Combes", "medium", 280, 200, 5, True, 2.4),
            Corner(5, "Malmedy", "fast", 250, 230, 6, False, 1.8),
            Corner(6, "Rivage", "medium", 200, 160, 4, True, 2.6),
            Corner(7, "Pouhon", "fast", 240, 220, 5, False, 2.2),
            Corner(8, "Fagnes", "fast", 280, 260, 6, False, 1.9),
            Corner(9, "Stavelot", "fast", 260, 240, 6, False, 2.0),
            Corner(10, "Bus Stop", "slow", 200, 120, 3, True, 3.1),
        ),
    ),
    "buddh": Track(
        name="Buddh International Circuit",
        length=5.125,
        turns=16,
        lap_record=85.249,
        sectors=(
            Sector(1, 1.8, (1, 2, 3, 4, 5), 26.5),
            Sector(2, 1.7, (6, 7, 8, 9, 10), 25.8),
            Sector(3, 1.625, (11, 12, 13, 14, 15, 16), 32.9),
        ),
        corners=(
            Corner(1, "Turn 1", "slow", 320, 140, 3, True, 3.8),
            Corner(2, "Turn 2", "medium", 180, 160, 4, False, 2.1),
            Corner(3, "Turn 3", "fast", 280, 260, 6, False, 1.9),
            Corner(4, "Turn 4", "medium", 220, 180, 5, True, 2.4),
            Corner(5, "Turn 5", "slow", 160, 120, 3, True, 2.8),
            Corner(6, "Turn 6", "fast", 300, 280, 7, False, 1.7),
            Corner(7, "Turn 7", "medium", 240, 200, 5, True, 2.3),
            Corner(8, "Turn 8", "slow", 180, 140, 4, True, 2.9),
            Corner(9, "Turn 9", "fast", 260, 240, 6, False, 1.8),
            Corner(10, "Turn 10-11", "medium", 200, 170, 4, True, 2.5),
            Corner(11, "Turn 12", "slow", 160, 120, 3, True, 3.0),
            Corner(12, "Turn 13", "medium", 180, 150, 4, False, 2.2),
            Corner(13, "Turn 14", "fast", 280, 260, 6, False, 1.9),
            Corner(14, "Turn 15", "medium", 220, 180, 5, True, 2.4),
            Corner(15, "Turn 16", "fast", 300, 280, 7, False, 1.6),
        ),
    ),
}


def lookup_track_by_name(name: Optional[str]) -> Optional[Track]:
    """Find a track by its display name.

    Args:
        name: Display name, e.g. "Monaco Grand Prix"

    Returns:
        Track, or None if the name is unknown
    """
    if not name:
        return None
    for track in TRACKS.values():
        if track.name == name:
            return track
    return None


def all_track_names() -> List[str]:
    return [track.name for track in TRACKS.values()]
