from typing import Any, Dict


def init_metrics() -> Dict[str, Any]:
    return {
        'cells': 0,
        'links': 0,
        'dead_ends': 0,
        'walls_marked': 0,
        'longest_path_length': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
