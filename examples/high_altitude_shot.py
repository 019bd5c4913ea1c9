# examples/high_altitude_shot.py
# Near-vertical launch from 100 km: gravity is ~3% weaker than at the surface.
from projectile_sim import LaunchParameters, run_simulation
from projectile_sim.core import classical_range, vertical_acceleration
from projectile_sim.renderer import BufferedRenderer
from projectile_sim.types import State

params = LaunchParameters(init_alt=100_000.0, init_vel=2_000.0, angle_deg=80.0, dt=0.5, final_time=1_000.0)

renderer = BufferedRenderer()
result = run_simulation(params, renderer)
traj = renderer.as_array()

print("g at launch:", vertical_acceleration(State(vert_pos=params.init_alt)))
print("apex:", traj[:, 1].max())
print("stop:", result.termination, "after", result.ticks, "ticks")
print("flat-gravity range from the ground:", classical_range(params.init_vel, params.angle_deg))
