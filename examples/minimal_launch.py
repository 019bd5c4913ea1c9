# examples/minimal_launch.py
from projectile_sim import LaunchParameters, run_simulation
from projectile_sim.renderer import ConsoleRenderer

params = LaunchParameters(
    init_alt=0.0,
    init_vel=50.0,
    angle_deg=45.0,
    dt=0.1,
    final_time=10.0,
)

result = run_simulation(params, ConsoleRenderer())

print("ticks:", result.ticks)
print("stop:", result.termination)
print("impact t:", result.impact_time)
print("impact x:", result.impact_range)
