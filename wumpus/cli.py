from __future__ import annotations
import argparse, csv, os
from typing import Optional

from .types import ArrowOutcome
from .simulation import SimulationConfig, RunStats, play
from .viz import draw_world_png

ARROW_MESSAGES = {
    ArrowOutcome.LOST: "The arrow hit a wall and is lost.",
    ArrowOutcome.KILLED: "The arrow hit and killed the Wumpus!",
    ArrowOutcome.NO_ARROWS: "No arrows left to shoot!",
}

EPISODE_MESSAGES = {
    "gold": "I found the gold!",
    "stuck": "No safe move available, agent is stuck!",
    "step_limit": "Step limit reached before finding the gold.",
}


def describe_outcome(outcome) -> str:
    if isinstance(outcome, ArrowOutcome):
        return ARROW_MESSAGES[outcome]
    return EPISODE_MESSAGES.get(outcome, f"Episode ended: {outcome}")


def format_stats(name: str, s: RunStats) -> str:
    return (f"{name:12s} | outcome={s.outcome:10s} | moves={s.moves:4d} | "
            f"turns={s.turns:4d} | decisions={s.decisions:3d} | "
            f"visited={len(s.visited):3d} | hazard={s.hazard_hit!s:5s} | "
            f"time={s.elapsed_sec*1000:7.2f} ms")


def _config(args: argparse.Namespace, seed: Optional[int]) -> SimulationConfig:
    return SimulationConfig(size=args.size, max_steps=args.max_steps, tie_break=args.tie_break, seed=seed)

# -------- subcommands --------

def cmd_run(args: argparse.Namespace) -> None:
    world, agent, st = play(_config(args, args.seed))
    for pos in st.path_taken[1:]:
        print("Agent moves to", pos)
    print(describe_outcome(st.outcome))
    print(format_stats(f"seed={args.seed}", st))
    if args.png:
        draw_world_png(world, st.visited, args.png)
        print("wrote", args.png)


def cmd_shoot(args: argparse.Namespace) -> None:
    world, agent, st = play(_config(args, args.seed))
    print(describe_outcome(st.outcome))
    for _ in range(args.shots):
        outcome = world.shoot_arrow()
        agent.note_arrow_outcome(outcome)
        print(f"shot from {world.position} facing {world.facing.name}:", describe_outcome(outcome))


def cmd_bench(args: argparse.Namespace) -> None:
    rows = []
    for i in range(args.count):
        seed = args.seed + i
        _, _, st = play(_config(args, seed))
        print(format_stats(f"seed={seed}", st))
        rows.append({
            "seed": seed,
            "size": args.size,
            "outcome": st.outcome,
            "moves": st.moves,
            "turns": st.turns,
            "decisions": st.decisions,
            "visited": len(st.visited),
            "hazard_hit": st.hazard_hit,
            "time_sec": round(st.elapsed_sec, 6),
        })
    if args.csv and rows:
        csv_dir = os.path.dirname(args.csv)
        if csv_dir:
            os.makedirs(csv_dir, exist_ok=True)
        with open(args.csv, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            writer.writerows(rows)
        print("wrote CSV:", args.csv)


def _add_world_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--size", type=int, default=4)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--max-steps", dest="max_steps", type=int, default=100)
    p.add_argument("--tie-break", dest="tie_break", choices=["row_major", "column_major"], default="row_major")


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Wumpus World agent simulation")
    sub = p.add_subparsers(dest="cmd", required=True)

    r = sub.add_parser("run", help="play one seeded episode")
    _add_world_args(r)
    r.add_argument("--png", type=str, default="")
    r.set_defaults(func=cmd_run)

    s = sub.add_parser("shoot", help="play one episode, then fire the arrow from the final pose")
    _add_world_args(s)
    s.add_argument("--shots", type=int, default=1)
    s.set_defaults(func=cmd_shoot)

    b = sub.add_parser("bench", help="play --count consecutive seeds")
    _add_world_args(b)
    b.add_argument("--count", type=int, default=30)
    b.add_argument("--csv", type=str, default="")
    b.set_defaults(func=cmd_bench)

    return p


def main(argv=None):
    ap = build_argparser()
    args = ap.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
