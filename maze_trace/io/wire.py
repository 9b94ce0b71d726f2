import json
from typing import Any, Dict, List, Tuple

import numpy as np

from maze_trace.core import trace
from maze_trace.api import GenerationResult, InvalidArgument, SolveResult

class WireCodec:
    """
    JSON shapes exchanged with the transport and rendering layers:
    - grid: flat list of n*n wall masks, row-major
    - coordinate: [x, y]; generation endpoints go out as {"x": .., "y": ..}
    """

    @staticmethod
    def parse_maze(text: str) -> List[int]:
        try:
            raw = json.loads(text)
        except (TypeError, ValueError) as e:
            raise InvalidArgument("Invalid 'maze': expect JSON array of integers.") from e
        if not isinstance(raw, list) or not all(WireCodec._is_int(v) for v in raw):
            raise InvalidArgument("Invalid 'maze': expect JSON array of integers.")
        return raw

    @staticmethod
    def parse_coordinate(text: str, name: str = "coordinate") -> Tuple[int, int]:
        try:
            raw = json.loads(text)
        except (TypeError, ValueError) as e:
            raise InvalidArgument(f"Invalid '{name}': expect JSON [x, y] of integers.") from e
        return WireCodec.coordinate_from_json(raw, name)

    @staticmethod
    def coordinate_from_json(raw: Any, name: str = "coordinate") -> Tuple[int, int]:
        # Accept both the [x, y] form and the {"x":.., "y":..} form generate emits
        if isinstance(raw, dict) and set(raw) >= {"x", "y"}:
            raw = [raw["x"], raw["y"]]
        if not isinstance(raw, list) or len(raw) != 2 or not all(WireCodec._is_int(v) for v in raw):
            raise InvalidArgument(f"Invalid '{name}': expect JSON [x, y] of integers.")
        return raw[0], raw[1]

    @staticmethod
    def load_problem(text: str) -> Dict[str, Any]:
        """
        Reads a document holding a maze plus endpoints. Accepted forms:
        the output of `generate` ({"steps", "start", "end"}, the last step is
        used), its diff-encoded form ({"initial", "diffs", "start", "end"},
        replayed to the last state) or {"maze", "start", "end"}.
        """
        try:
            doc = json.loads(text)
        except ValueError as e:
            raise InvalidArgument(f"Invalid maze document: {e}") from e
        if not isinstance(doc, dict):
            raise InvalidArgument("Invalid maze document: expected a JSON object.")

        if "maze" in doc:
            maze = doc["maze"]
        elif "steps" in doc:
            steps = doc["steps"]
            if not isinstance(steps, list) or not steps:
                raise InvalidArgument("Invalid 'steps': expect a non-empty JSON array of grids.")
            maze = steps[-1]
        elif "initial" in doc and "diffs" in doc:
            maze = WireCodec._replay_last(doc["initial"], doc["diffs"])
        else:
            raise InvalidArgument("Invalid maze document: needs 'maze', 'steps' or 'initial' and 'diffs'.")
        if not WireCodec._is_int_list(maze):
            raise InvalidArgument("Invalid 'maze': expect JSON array of integers.")

        return {
            "maze": maze,
            "start": WireCodec.coordinate_from_json(doc.get("start"), "start"),
            "end": WireCodec.coordinate_from_json(doc.get("end"), "end"),
        }

    @staticmethod
    def dump_generation(result: GenerationResult, diffs: bool = False) -> str:
        """
        Full snapshots by default. With diffs=True the trace is sent as the
        first snapshot plus [indices, values] per later step.
        """
        if not diffs:
            return json.dumps(result.to_dict())

        doc = result.to_dict()
        steps = doc.pop("steps")
        doc["initial"] = steps[0]
        doc["diffs"] = [[indices.tolist(), values.tolist()] for indices, values in trace.diffs(result.steps)]
        return json.dumps(doc)

    @staticmethod
    def _replay_last(initial: Any, step_diffs: Any) -> List[int]:
        if not WireCodec._is_int_list(initial) or not initial or not all(0 <= v <= 255 for v in initial):
            raise InvalidArgument("Invalid 'initial': expect JSON array of integers.")
        if not isinstance(step_diffs, list):
            raise InvalidArgument("Invalid 'diffs': expect JSON array of [indices, values] pairs.")

        size = len(initial)
        parsed = []
        for entry in step_diffs:
            if (not isinstance(entry, list) or len(entry) != 2
                    or not WireCodec._is_int_list(entry[0]) or not WireCodec._is_int_list(entry[1])
                    or len(entry[0]) != len(entry[1])
                    or not all(0 <= i < size for i in entry[0])
                    or not all(0 <= v <= 255 for v in entry[1])):
                raise InvalidArgument("Invalid 'diffs': expect JSON array of [indices, values] pairs.")
            parsed.append((np.asarray(entry[0], dtype=np.intp), np.asarray(entry[1], dtype=np.uint8)))

        state = None
        for state in trace.replay(initial, parsed):
            pass
        return state.tolist()

    @staticmethod
    def dump_solution(result: SolveResult, start: Tuple[int, int], end: Tuple[int, int]) -> str:
        doc = {"start": list(start), "end": list(end)}
        doc.update(result.to_dict())
        return json.dumps(doc)

    @staticmethod
    def _is_int(v) -> bool:
        return isinstance(v, int) and not isinstance(v, bool)

    @staticmethod
    def _is_int_list(v) -> bool:
        return isinstance(v, list) and all(WireCodec._is_int(x) for x in v)
