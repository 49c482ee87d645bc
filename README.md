# boids3d

This package simulates boids flocking in three dimensions. Boids fly inside a box-shaped flight zone that is 100 wide (X), 80 high (Y) and 100 deep (Z). Each boid belongs to one of two groups, and each group is pulled towards its own target point.

Boids follow three rules: cohesion, alignment and separation. Each rule applies only to neighbours that lie inside the boid's field of view. Boids also steer away from spherical obstacles, and they are nudged back when they come near the walls.

The package needs nothing beyond the standard library.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Command line

```
boids3d --count 200 --steps 120 --seed 1
```

The command runs the simulation headlessly and prints one summary line. The line gives the number of boids, the steps taken, the simulated time, the centre of the flock and the mean speed.

Options:

- `--count`: number of boids. The default is 1000.
- `--steps`: frames to simulate. The default is 60.
- `--dt`: seconds per frame. The default is 1/60.
- `--seed`: random seed for spawning.

A negative value for `--count` or `--steps` is rejected.

## Library use

```python
from boids3d.settings import BoidSettings
from boids3d.simulation import Simulation

sim = Simulation(BoidSettings(count=200), seed=1)
boids = sim.run(steps=100, dt=1 / 60)
print(boids[0].position, boids[0].velocity)
```

`Simulation` accepts optional `settings`, `targets`, `boids`, `obstacles` and `seed` arguments.

Each call to `Simulation.step(dt)` carries out one frame, in this order:

1. Rebuild the neighbour index (`boids3d.spatial.KDTree3`). This happens at most once every 0.01 simulated seconds.
2. Compute the flocking and target-attraction forces.
3. Compute the obstacle avoidance forces.
4. Add the forces to each boid's acceleration.
5. Integrate velocity and position. Speed is clamped between the minimum and maximum speed, and the boid's rotation is turned to face its direction of travel.
6. Confine boids to the flight zone, if wall bouncing is enabled.

`Simulation.run(steps, dt)` returns the list of boids. It raises `ValueError` if `steps` is negative.

### Modules

- `boids3d.geometry`: the `Vec3` and `Quat` types and the flight-zone constants (`WIDTH`, `HEIGHT`, `DEPTH`, `MIN_HEIGHT`).
- `boids3d.components`: `Boid`, `Obstacle` and `ApplyForceEvent`.
- `boids3d.spatial`: `KDTree3`. Its `within_distance(position, radius)` method returns the `(position, entity)` pairs within the radius, nearest first.
- `boids3d.flocking`: the rules and per-frame systems:
  - `cohesion`
  - `separation`
  - `alignment`
  - `attraction_to_target`
  - `is_in_field_of_view`
  - `flocking_forces`
  - `avoid_obstacles`
  - `apply_forces`
  - `update_boids`
  - `confine_boids`
- `boids3d.spawning`:
  - `spawn_boid` and `spawn_boids`: random placement, starting at minimum speed in a random direction.
  - `spawn_obstacles`: three spheres of radius 10.
  - `flight_zone`: the centre and half-size of the zone's box.
- `boids3d.camera`: `CameraSettings` and `OrbitCamera`, described below.

## Tuning

`boids3d.settings.BoidSettings` holds the tunable parameters:

- force coefficients
- perception ranges
- speed limits
- field of view
- wall bouncing
- boid count

`BoidSettings.set(name, value)` changes an adjustable parameter and returns the stored value. The value is clamped to that parameter's range, and `count` is rounded to an integer. The ranges are listed in `SLIDER_RANGES`, and `bounce_against_walls` is a toggle. An unknown name raises `KeyError`.

`GroupsTargets` holds the attraction point of each group, indexed by group number.

## Camera

`boids3d.camera.OrbitCamera` models a camera that orbits the origin at a fixed distance. Call `orbit(delta_x, delta_y, pressed, dt)` with the accumulated mouse motion. While `pressed` is true, the motion changes yaw and pitch. Pitch is clamped just short of straight up and straight down.

## What it does not do

The package does not draw anything. It has no window, no 3D rendering, no bird models and no interactive settings panel. The camera is a model only: it computes a position and a rotation, but nothing displays them.