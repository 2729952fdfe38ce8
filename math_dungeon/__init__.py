"""
Math Dungeon.

Game rules built on top of dungeon_engine:
- Components (character stats, curriculum records)
- Math (problem generation, answer validation)
- Battle (turn-based math combat)
- Shop (weapons)
- Save (persistence)
- Progression (curriculum progress)
- Dungeon (curriculum loading, searching, leaderboard sorting)
- Game (session facade)
"""

__version__ = "0.1.0"
