# acmsim

This package simulates the q-state active clock model (ACM). The model
has self-propelled particles that move off-lattice in a periodic
two-dimensional box of size `LX` by `LY`. Each particle has one of `q`
discrete orientations. At every update a particle can do one of three
things:

- hop one unit length. With weight `epsilon` it hops along its own
  orientation, and otherwise along a random one.
- flip to another orientation, chosen uniformly. The flip probability
  grows with the alignment gained with neighbours closer than one unit,
  at inverse temperature `beta`.
- wait.

## Installation

```
pip install .
```

The package needs Python 3.10 or newer and uses numpy. To run the
tests, install the `test` extra (`pip install .[test]`) and run `pytest`.

## Running a simulation

```
acmsim -q=4 -beta=2 -rho0=1.5 -epsilon=0.2 -LX=400 -LY=50 -tmax=1000000 -init=0 -ran=0 -threads=4
```

Each argument has the form `-name=value`, and every value is optional.
The defaults are the values shown above. The value is read from its
leading number, and it counts as 0 when there is none. The command
exits with status 1 and a message on standard error in these cases:

- an argument it does not recognise
- an invalid parameter, such as `epsilon` outside `[0, 1]`, `q < 2`, a
  non-positive box size, a negative `rho0` or an unknown `init`
- a flip probability that, together with the hop probability, exceeds
  one

| argument    | meaning                                                        |
|-------------|----------------------------------------------------------------|
| `-q`        | number of orientations                                         |
| `-beta`     | inverse temperature                                            |
| `-rho0`     | mean density; the run has `int(LX*LY*rho0)` particles          |
| `-epsilon`  | self-propulsion bias, between 0 and 1                          |
| `-LX`,`-LY` | box size                                                       |
| `-tmax`     | number of time steps                                           |
| `-init`     | initial condition (see below)                                  |
| `-ran`      | seed index; the generator is seeded with `threads * ran`       |
| `-threads`  | number of particle groups updated in turn at each step         |

Updates run one after another in a single process. `-threads` changes
how particles are grouped and how the generator is seeded, so it does
change the results. It does not start parallel work.

Initial conditions:

- `0`: random positions and random orientations
- `1`: random positions, all particles in orientation 0
- `2`: a transverse band over `0.4 LX <= x < 0.6 LX`, orientation 0
- `3`: a longitudinal lane in the same band, orientation `q // 4`
  (this is meant for `q` a multiple of 4)

While the run goes on, the command prints one progress line every 500
steps: the time, the density, the magnetisation, its angle and the
elapsed wall-clock time.

## Output

Output is written to directories under the current working directory:

- `data_ACM_averages/ACM_AVERAGES_...txt`: one line `t rho mag phi mx my`
  every 500 steps and at `tmax`. It holds the mean density, the
  magnetisation, its angle and its components.
- `data_ACM_averages/ACM_fluctuations_...txt`: collection starts after
  equilibration (`t > 5000`). At each step, ten random sub-boxes are
  sampled for every size `l`. The file is rewritten every `tmax // 100`
  steps. It has a header line, then one line `l <n> var(n) <m> var(m)`
  for each size.
- `data_ACM_dynamics2d/ACM_RHO_..._t=T.bin` and `ACM_THETA_..._t=T.bin`:
  snapshots of the cell occupation (int16) and the local mean
  orientation (float32, `atan2(my, mx)`). They are stored row by row in
  y, so a value is at index `y * LX + x`.
- `data_ACM_particles/ACM_particles_..._t=T.bin`: one float32 triple
  `x y phi` for each particle, where `phi = 2*pi*sigma/q`.

Numbers are written with six significant digits. File names hold every
parameter of the run, for example
`ACM_AVERAGES_q=4_beta=2_epsilon=0.2_rho0=1.5_LX=400_LY=50_init=0_ran=0.txt`.

## Using the library

```python
from acmsim.rng import RandomSource
from acmsim.simulation import Parameters, Simulation

params = Parameters(q=4, beta=2.0, rho0=1.5, epsilon=0.2, lx=40, ly=10, tmax=1000)
sim = Simulation(params, RandomSource(0))
for _ in range(100):
    sim.step()
rho, mag, phi, mx, my = sim.observables()
```

The main pieces:

- `Simulation.run(root, log)` carries out the whole run with all of the
  exports. It writes under `root` and passes progress lines to `log`.
  It raises `acmsim.simulation.SimulationError` when the flip and hop
  probabilities add up to more than one.
- `acmsim.particles` provides `Particle`, `InitialCondition`, the
  per-cell index `Sectors` and the periodic `distance2`.
- `acmsim.averages.Averages` collects the sub-box fluctuations, and
  `grid_average` averages a field.
- `acmsim.output.RunNaming` builds the output file names.
  `export_dynamics` and `export_particles` write the binary snapshots.
- `acmsim.rng.RandomSource` gives uniform numbers in `(0, 1)` and
  Box–Muller Gaussian numbers.
- `acmsim.timing.RunTimer` and `format_elapsed` format elapsed time as
  `-ctime=00h00m00s`.

## What the package does not do

The package produces the raw data files only. It does not plot them or
read them back for analysis.