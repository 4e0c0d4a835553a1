"""
game_context.py
---------------
Session context shared between scenes.
Tracks legs played, wins/losses from the player's seat, forfeits, darts thrown
and total playtime. Holds the last leg's result until it is applied.
"""


class GameContext:
    def __init__(self):
        self.stats = {
            "legs": 0,
            "wins": 0,
            "losses": 0,
            "forfeits": 0,
            "darts_thrown": 0,
            "total_time": 0.0,  # seconds spent in scenes
        }

        self.flags = {}  # launch options (seed, ...)
        self.last_result = {}  # filled when a leg ends

    # -----------------------------------------------------
    #   Core logic
    # -----------------------------------------------------
    def apply_result(self):
        """Fold the most recent leg result into cumulative stats."""
        if not self.last_result:
            return

        r = self.last_result
        outcome = r.get("outcome", "")
        details = r.get("details") or {}

        self.stats["legs"] += 1
        self.stats["darts_thrown"] += int(details.get("darts_thrown", 0))
        if outcome == "win":
            self.stats["wins"] += 1
        elif outcome == "lose":
            self.stats["losses"] += 1
        elif outcome == "forfeit":
            self.stats["forfeits"] += 1

    def add_playtime(self, dt):
        """Add delta-time (in seconds) to total runtime."""
        self.stats["total_time"] += dt

    def summary(self):
        return {
            "stats": self.stats,
            "flags": self.flags,
            "last_result": self.last_result,
        }

    def __repr__(self):
        return (
            f"<GameContext legs={self.stats['legs']} wins={self.stats['wins']} "
            f"losses={self.stats['losses']} darts={self.stats['darts_thrown']} "
            f"time={self.stats['total_time']:.1f}s>"
        )
