"""Summary report generation for random walk runs."""

from pathlib import Path
from typing import TYPE_CHECKING

from ..model.walker import walker_type_name

if TYPE_CHECKING:
    from ..model.simulation import Simulation

# File names written under the output directory, by export kind
OUTPUT_FILES = {
    'csv': 'paths.csv',
    'snapshot': 'paths.png',
    'gif': 'paths.gif',
}

OUTPUT_LABELS = {
    'csv': 'CSV Log',
    'snapshot': 'Snapshot',
    'gif': 'Animation',
}


class Reporter:
    """Formats per-walker details and a run summary as plain text."""

    def describe_walkers(self, simulation: "Simulation") -> str:
        """One block per walker: type, speed, start, end and path length."""
        lines = []
        for i, walker in enumerate(simulation.get_walkers()):
            start = walker.get_start_point()
            end = walker.get_end_point()
            lines.extend([
                f"Walker {i}: {walker_type_name(walker.get_walker_type())}",
                f"  Speed:       {walker.get_speed():.4f}",
                f"  Start:       ({start.x:.3f}, {start.y:.3f})",
                f"  End:         ({end.x:.3f}, {end.y:.3f})",
                f"  Path length: {len(walker.get_path())} poses",
            ])
        return "\n".join(lines)

    def generate_summary(self, simulation: "Simulation",
                         output_dir: Path,
                         csv_enabled: bool,
                         snapshot_enabled: bool,
                         gif_enabled: bool) -> str:
        """Returns formatted text report."""
        config = simulation.get_config()
        bounds = simulation.get_bounds()
        speeds = [w.get_speed() for w in simulation.get_walkers()]
        counts = simulation.walker_type_counts()

        lines = [
            "",
            "=" * 80,
            "                       RANDOM WALK SIMULATION REPORT",
            "=" * 80,
            f"Base Seed: {config.seed}",
            f"Move Pattern: {config.move_pattern.value}-direction",
            f"Speed Range: [{config.min_speed}, {config.max_speed}]",
            "",
            "SIMULATION METRICS",
            "-" * 40,
            f"Steps per Walker:      {simulation.get_total_steps()}",
            f"Walkers:               {simulation.num_walkers()}",
            f"Mean Speed:            {sum(speeds) / len(speeds):.4f}",
            f"Min / Max Speed:       {min(speeds):.4f} / {max(speeds):.4f}",
            f"Bounds Centre:         ({bounds.pose.point.x:.3f}, {bounds.pose.point.y:.3f})",
            f"Bounds Size:           {bounds.size.x:.3f} x {bounds.size.y:.3f}",
            "",
            "SPEED TIERS",
            "-" * 40,
        ]
        for walker_type, count in counts.items():
            lines.append(f"{walker_type_name(walker_type) + ':':<23}{count}")

        lines.extend(["", "OUTPUT FILES", "-" * 40])
        enabled = {'csv': csv_enabled, 'snapshot': snapshot_enabled, 'gif': gif_enabled}
        for kind, label in OUTPUT_LABELS.items():
            target = output_dir / OUTPUT_FILES[kind] if enabled[kind] else "(disabled)"
            lines.append(f"{label + ':':<12}{target}")

        lines.append("=" * 80)

        return "\n".join(lines)
