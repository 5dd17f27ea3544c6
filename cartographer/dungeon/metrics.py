from typing import Any, Dict


def init_metrics() -> Dict[str, Any]:
    return {
        'rooms_requested': 0,
        'rooms_placed': 0,
        'rooms_dropped': 0,
        'doors_created': 0,
        'door_cells': 0,
        'degenerate_doors': 0,
        'candidates_considered': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
