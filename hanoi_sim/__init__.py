"""
Towers of Hanoi Simulator.

Subpackages:
    - engine: Puzzle state engine (pegs, discs, moves, solver)

Modules:
    - settings: Persistent user preferences (config.json)
    - solver_worker: Background QThread that plays the auto-solution
"""
