"""Wire Game - Game Info

Steer a constantly moving square through a randomly generated corridor
to the goal. Touching the walls ends the run; the finish time is the score.
"""

NAME = "Wire Game"
DESCRIPTION = "Steer through the corridor to the goal without touching the walls."
VERSION = "1.0.0"
AUTHOR = "Iraira Team"

ARGUMENTS = [
    {
        'name': '--difficulty',
        'type': str,
        'default': 'easy',
        'choices': ['easy', 'medium', 'hard', 'super-hard'],
        'help': 'Difficulty: easy, medium, hard, super-hard'
    },
    {
        'name': '--policy',
        'type': str,
        'default': None,
        'choices': ['corridor', 'rectangle'],
        'help': 'Collision policy: corridor (strict tube) or rectangle (wall blocks)'
    },
]


def get_game_mode(**kwargs):
    """Factory function to create game instance."""
    from games.WireGame.game_mode import WireGameMode

    # Map CLI arg names to constructor params
    param_map = {
        'difficulty': 'difficulty',
        'policy': 'policy',
        'width': 'canvas_width',
        'height': 'canvas_height',
        'auto_finish_effects': 'auto_finish_effects',
    }

    constructor_kwargs = {}
    for cli_name, param_name in param_map.items():
        if cli_name in kwargs and kwargs[cli_name] is not None:
            constructor_kwargs[param_name] = kwargs[cli_name]

    return WireGameMode(**constructor_kwargs)
