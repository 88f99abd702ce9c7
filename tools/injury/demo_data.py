"""Sample injury payloads used by ``/injuries --demo`` and the tests.

Payloads use the web client's camelCase keys so they exercise the same
parsing path as user-edited injury files.
"""

from __future__ import annotations

from typing import Dict, List

DEMO_INJURIES: List[Dict] = [
    {
        "id": 1,
        "player": "Tyrese Haliburton",
        "team": "Indiana Pacers",
        "position": "PG",
        "injury": "Achilles",
        "status": "Out (Season)",
        "avgMinutes": 34.8,
        "usageRate": 29.4,
        "teammates": [
            {
                "name": "Bennedict Mathurin",
                "position": "SG",
                "currentMin": 28.5,
                "currentUsage": 24.1,
                "stats": {"pts": 17.2, "reb": 5.8, "ast": 2.3, "stl": 0.9, "blk": 0.4, "tov": 2.1, "fg": 44.3, "threes": 2.4},
            },
            {
                "name": "Aaron Nesmith",
                "position": "SF",
                "currentMin": 27.3,
                "currentUsage": 16.8,
                "stats": {"pts": 11.8, "reb": 3.7, "ast": 1.9, "stl": 0.8, "blk": 0.3, "tov": 1.2, "fg": 48.1, "threes": 1.7},
            },
            {
                "name": "Obi Toppin",
                "position": "PF",
                "currentMin": 23.9,
                "currentUsage": 18.3,
                "stats": {"pts": 10.3, "reb": 3.9, "ast": 1.5, "stl": 0.5, "blk": 0.6, "tov": 1.0, "fg": 52.7, "threes": 1.3},
            },
            {
                "name": "T.J. McConnell",
                "position": "PG",
                "currentMin": 19.7,
                "currentUsage": 14.2,
                "stats": {"pts": 6.8, "reb": 2.8, "ast": 5.2, "stl": 1.3, "blk": 0.1, "tov": 0.9, "fg": 56.3, "threes": 0.2},
            },
        ],
    },
    {
        "id": 2,
        "player": "Kawhi Leonard",
        "team": "LA Clippers",
        "position": "SF",
        "injury": "Knee inflammation",
        "status": "Out 2-3 weeks",
        "avgMinutes": 33.2,
        "usageRate": 31.7,
        "teammates": [
            {
                "name": "James Harden",
                "position": "PG",
                "currentMin": 35.3,
                "currentUsage": 29.8,
                "stats": {"pts": 21.2, "reb": 7.9, "ast": 8.5, "stl": 1.3, "blk": 0.8, "tov": 3.5, "fg": 42.8, "threes": 2.7},
            },
            {
                "name": "Paul George",
                "position": "SF",
                "currentMin": 33.9,
                "currentUsage": 28.3,
                "stats": {"pts": 23.4, "reb": 5.2, "ast": 3.5, "stl": 1.5, "blk": 0.5, "tov": 2.8, "fg": 45.7, "threes": 3.2},
            },
            {
                "name": "Norman Powell",
                "position": "SG",
                "currentMin": 26.1,
                "currentUsage": 22.9,
                "stats": {"pts": 13.9, "reb": 2.6, "ast": 1.3, "stl": 0.8, "blk": 0.3, "tov": 1.3, "fg": 46.9, "threes": 2.1},
            },
            {
                "name": "Ivica Zubac",
                "position": "C",
                "currentMin": 28.7,
                "currentUsage": 16.4,
                "stats": {"pts": 11.7, "reb": 9.2, "ast": 1.4, "stl": 0.4, "blk": 1.2, "tov": 1.5, "fg": 64.3, "threes": 0.0},
            },
        ],
    },
    {
        "id": 3,
        "player": "Joel Embiid",
        "team": "Philadelphia 76ers",
        "position": "C",
        "injury": "Knee soreness",
        "status": "Day-to-Day",
        "avgMinutes": 34.6,
        "usageRate": 33.8,
        "teammates": [
            {
                "name": "Tyrese Maxey",
                "position": "PG",
                "currentMin": 37.2,
                "currentUsage": 30.1,
                "stats": {"pts": 25.9, "reb": 3.7, "ast": 6.2, "stl": 1.0, "blk": 0.5, "tov": 2.6, "fg": 45.0, "threes": 3.1},
            },
            {
                "name": "Kelly Oubre Jr.",
                "position": "SF",
                "currentMin": 32.3,
                "currentUsage": 21.7,
                "stats": {"pts": 15.4, "reb": 5.1, "ast": 1.5, "stl": 1.1, "blk": 0.9, "tov": 1.7, "fg": 44.6, "threes": 1.9},
            },
            {
                "name": "Tobias Harris",
                "position": "PF",
                "currentMin": 30.9,
                "currentUsage": 19.8,
                "stats": {"pts": 17.2, "reb": 6.5, "ast": 3.1, "stl": 1.0, "blk": 0.6, "tov": 1.5, "fg": 48.7, "threes": 1.4},
            },
            {
                "name": "Paul Reed",
                "position": "C",
                "currentMin": 18.4,
                "currentUsage": 15.3,
                "stats": {"pts": 7.3, "reb": 6.0, "ast": 0.9, "stl": 0.9, "blk": 1.1, "tov": 1.2, "fg": 52.1, "threes": 0.0},
            },
        ],
    },
]
