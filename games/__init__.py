"""
Game implementations.

games/number_guess/ provides:
- game.py: Round state and engine
- tiers.py: Static tables (difficulty presets)
- action_parser.py: Prompt parsing (core.InputParser)
- config.py: Game-specific configuration (Pydantic model)
- create_game(): Factory function for instantiation from config
"""
