"""
Logging Module for Solver Benchmarks

Structured, file-based logging of solver runs. Each experiment writes a CSV
of runs, a JSON record with environment info, and a timestamped detail log.
"""

import csv
import datetime
import json
import os
import platform
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from .solution import Solution


CSV_HEADERS = [
    "timestamp", "experiment_id", "dataset", "height", "width",
    "family", "solver_name", "time_ms", "total", "selected",
    "status", "notes",
]


class BenchmarkLogger:
    """
    Logging system for solver benchmark experiments.

    Layout under `log_dir`:
        performance/<id>.csv   one row per solver run
        experiments/<id>.json  metadata, environment, all results
        detailed/<id>.log      human-readable trace
        summaries/             text summaries
    """

    def __init__(self, log_dir: str = "logs", experiment_name: Optional[str] = None):
        """
        Initialize benchmark logger.

        Args:
            log_dir: Directory for log files
            experiment_name: Name for this experiment session
        """
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        for sub in ("experiments", "performance", "detailed", "summaries"):
            (self.log_dir / sub).mkdir(exist_ok=True)

        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        prefix = experiment_name or "exp"
        self.experiment_id = f"{prefix}_{timestamp}"

        self.csv_file = self.log_dir / "performance" / f"{self.experiment_id}.csv"
        self.json_file = self.log_dir / "experiments" / f"{self.experiment_id}.json"
        self.detail_file = self.log_dir / "detailed" / f"{self.experiment_id}.log"

        self.metadata = {
            "experiment_id": self.experiment_id,
            "start_time": datetime.datetime.now().isoformat(),
            "environment": self._get_environment_info(),
            "results": [],
        }

        with open(self.csv_file, 'w', newline='') as f:
            csv.writer(f).writerow(CSV_HEADERS)

        self._log_detail(f"Experiment {self.experiment_id} started")
        self._log_detail(f"Environment: {self.metadata['environment']}")

    def _get_environment_info(self) -> Dict[str, str]:
        """Collect environment information for reproducibility."""
        env_info = {
            "python_version": platform.python_version(),
            "platform": platform.platform(),
            "processor": platform.processor(),
            "hostname": platform.node(),
            "numpy_version": np.__version__,
        }

        for var in ["OMP_NUM_THREADS", "MKL_NUM_THREADS", "OPENBLAS_NUM_THREADS", "PYTHONHASHSEED"]:
            env_info[var] = os.environ.get(var, "not_set")

        import scipy
        import lap
        env_info["scipy_version"] = scipy.__version__
        env_info["lap_version"] = getattr(lap, "__version__", "available")
        return env_info

    def _log_detail(self, message: str):
        """Write detailed log message."""
        timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(self.detail_file, 'a') as f:
            f.write(f"[{timestamp}] {message}\n")

    def log_result(self,
                   dataset: str,
                   height: int,
                   width: int,
                   family: str,
                   solver_name: str,
                   time_seconds: float,
                   total: Optional[int],
                   selected: int = 0,
                   status: str = "success",
                   notes: str = "",
                   extra_data: Optional[Dict[str, Any]] = None):
        """
        Log one solver run.

        Args:
            dataset: Name of the matrix/problem
            height, width: Matrix dimensions
            family: Generator family (uniform, tie, ...)
            solver_name: Name of the solver used
            time_seconds: Execution time in seconds
            total: Total weight found (None on failure)
            selected: Number of selected elements
            status: success/failure/error
            notes: Additional notes
            extra_data: Additional structured data (e.g. solver stats)
        """
        timestamp = datetime.datetime.now().isoformat()

        with open(self.csv_file, 'a', newline='') as f:
            csv.writer(f).writerow([
                timestamp, self.experiment_id, dataset, height, width,
                family, solver_name, time_seconds * 1000, total, selected,
                status, notes,
            ])

        self._log_detail(
            f"{solver_name} on {dataset} ({height}x{width}): "
            f"{time_seconds * 1000:.3f}ms, total={total}, status={status}"
        )

        result_data = {
            "timestamp": timestamp,
            "dataset": dataset,
            "height": height,
            "width": width,
            "family": family,
            "solver_name": solver_name,
            "time_seconds": time_seconds,
            "time_ms": time_seconds * 1000,
            "total": total,
            "selected": selected,
            "status": status,
            "notes": notes,
        }
        if extra_data:
            result_data["extra_data"] = extra_data

        self.metadata["results"].append(result_data)

    def log_solution(self, dataset: str, family: str, solution: Solution,
                     height: int, width: int, time_seconds: float, notes: str = ""):
        """Log a successful run from its Solution."""
        self.log_result(
            dataset=dataset,
            height=height,
            width=width,
            family=family,
            solver_name=solution.solver,
            time_seconds=time_seconds,
            total=solution.total,
            selected=len(solution),
            notes=notes,
            extra_data=dict(solution.stats) or None,
        )

    def log_comparison(self, dataset: str, height: int, width: int, family: str,
                       results: Dict[str, Dict[str, Any]]):
        """
        Log results of several solvers on one matrix.

        Args:
            results: solver_name -> {time, total, selected, status}
        """
        self._log_detail(f"=== Comparison: {dataset} ({height}x{width}) ===")

        for solver_name, result in results.items():
            self.log_result(
                dataset=dataset,
                height=height,
                width=width,
                family=family,
                solver_name=solver_name,
                time_seconds=result.get('time', 0.0),
                total=result.get('total'),
                selected=result.get('selected', 0),
                status=result.get('status', 'unknown'),
                notes=result.get('notes', ''),
            )

        exact = {name: r['total'] for name, r in results.items()
                 if name != 'Greedy' and r.get('status') == 'success'}
        if exact and len(set(exact.values())) > 1:
            self._log_detail(f"Exact solvers disagree: {exact}")
        greedy = results.get('Greedy')
        if exact and greedy and greedy.get('status') == 'success':
            gap = max(exact.values()) - greedy['total']
            self._log_detail(f"Greedy gap to optimum: {gap}")

    def save_experiment(self):
        """Save complete experiment data to JSON."""
        self.metadata["end_time"] = datetime.datetime.now().isoformat()

        with open(self.json_file, 'w') as f:
            json.dump(self.metadata, f, indent=2, default=str)

        self._log_detail(f"Experiment {self.experiment_id} completed")
        self._log_detail(f"Results saved to {self.json_file}")

    def generate_summary(self, output_file: Optional[str] = None) -> str:
        """
        Generate a human-readable summary of the experiment.

        Args:
            output_file: Optional file name under summaries/

        Returns:
            Summary text
        """
        if not self.metadata["results"]:
            return "No results to summarize."

        lines = [
            f"Experiment Summary: {self.experiment_id}",
            "=" * 60,
            f"Start Time: {self.metadata['start_time']}",
            f"Total Results: {len(self.metadata['results'])}",
            "",
            "Solver Performance Summary:",
            "-" * 40,
        ]

        solver_stats: Dict[str, Dict[str, Any]] = {}
        for result in self.metadata["results"]:
            stats = solver_stats.setdefault(result["solver_name"], {"times": [], "count": 0})
            if result["status"] == "success":
                stats["times"].append(result["time_ms"])
            stats["count"] += 1

        for solver, stats in solver_stats.items():
            if stats["times"]:
                lines.append(
                    f"{solver:12}: {stats['count']:3} runs, "
                    f"avg={np.mean(stats['times']):8.3f}ms, med={np.median(stats['times']):8.3f}ms"
                )
            else:
                lines.append(f"{solver:12}: {stats['count']:3} runs, all failed")

        families: Dict[str, int] = {}
        for result in self.metadata["results"]:
            families[result["family"]] = families.get(result["family"], 0) + 1

        lines += ["", "Families Tested:", "-" * 25]
        for family, count in families.items():
            lines.append(f"{family:15}: {count:3} runs")

        summary_text = "\n".join(lines)

        name = output_file or f"{self.experiment_id}_summary.txt"
        summary_file = self.log_dir / "summaries" / name
        with open(summary_file, 'w') as f:
            f.write(summary_text)

        self._log_detail(f"Summary saved to {summary_file}")
        return summary_text


def get_latest_experiment(log_dir: str = "logs") -> Optional[str]:
    """Get the most recent experiment ID from logs."""
    log_path = Path(log_dir) / "experiments"
    if not log_path.exists():
        return None

    json_files = list(log_path.glob("*.json"))
    if not json_files:
        return None

    latest_file = max(json_files, key=lambda f: f.stat().st_mtime)
    return latest_file.stem


def load_experiment(experiment_id: str, log_dir: str = "logs") -> Optional[Dict[str, Any]]:
    """Load experiment data from JSON file."""
    json_file = Path(log_dir) / "experiments" / f"{experiment_id}.json"

    if not json_file.exists():
        return None

    with open(json_file, 'r') as f:
        return json.load(f)


def list_experiments(log_dir: str = "logs") -> List[str]:
    """List all available experiment IDs, newest first."""
    log_path = Path(log_dir) / "experiments"
    if not log_path.exists():
        return []

    json_files = list(log_path.glob("*.json"))
    return [f.stem for f in sorted(json_files, key=lambda f: f.stat().st_mtime, reverse=True)]
