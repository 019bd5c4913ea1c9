"""
Microbenchmark: time per RK4 step and per full trajectory vs step size.
Run:
  python benchmarks/bench_steps.py
"""
import time
from projectile_sim import LaunchParameters, State, rk4_step, run_simulation
from projectile_sim.renderer import NullRenderer


def bench_step(steps: int = 100_000):
    s = State(vert_pos=0.0, vert_vel=35.0, horz_vel=35.0)
    t0 = time.perf_counter()
    for _ in range(steps):
        s = rk4_step(s, 1e-4)
    t1 = time.perf_counter()
    return (t1 - t0) / steps


def bench_run(dt: float):
    params = LaunchParameters(init_alt=0.0, init_vel=50.0, angle_deg=45.0, dt=dt, final_time=10.0)
    t0 = time.perf_counter()
    result = run_simulation(params, NullRenderer())
    t1 = time.perf_counter()
    return t1 - t0, result


if __name__ == "__main__":
    per_step = bench_step()
    print(f"rk4_step: {1e6*per_step:8.3f} us  steps/s={1/per_step:10.1f}")
    print()
    for dt in [1.0, 0.1, 0.01, 0.001]:
        elapsed, result = bench_run(dt)
        print(f"dt={dt:<6}  ticks={result.ticks:6d}  run={1e3*elapsed:8.3f} ms  range={result.impact_range:.6f} m")
