# libpower

Small building blocks for power electronics and digital control loops,
written in plain Python with no third-party dependencies.

| Module | Contents |
| --- | --- |
| `libpower.cntl_2p2z` | `Coefficients`, `Variables`, `Controller2p2z`: a 2-pole/2-zero compensator with output saturation |
| `libpower.cntl_3p3z` | `Coefficients`, `Variables`, `Controller3p3z`: a 3-pole/3-zero compensator with output saturation |
| `libpower.cntl_pi` | `ControllerPI`: a PI controller with anti-windup |
| `libpower.cntl_pid` | `ControllerPID`: a PID controller driven by timestamps |
| `libpower.butterworth_lpf`, `libpower.butterworth_hpf` | `ButterworthLPF`, `ButterworthHPF`: cascaded second-order Butterworth filters |
| `libpower.chebyshev_lpf`, `libpower.chebyshev_hpf` | `ChebyshevLPF`, `ChebyshevHPF`: cascaded second-order Chebyshev filters |
| `libpower.incremental_conductance` | `MPPT`: incremental conductance maximum power point tracker |
| `libpower.perturb_and_observe` | `MPPT`: perturb and observe maximum power point tracker |
| `libpower.transform` | `Clarke`, `IClarke`, `Park`, `IPark`: reference-frame transforms |
| `libpower.signal` | `Signal`, `SignalType`, `SignalMetrics`: generated test waveforms and their measurements |

Python 3.10 or later is required.

## Compensators

`Coefficients` holds the difference-equation coefficients and the output
limits `max` and `min` (by default the largest and smallest 32-bit float, so
no limiting). `Coefficients.with_default_values()` gives a set of example
coefficients. Each call to `calculate(ref_input, fdbk)` shifts the error and
output history, computes the new output from the error `ref_input - fdbk`,
clamps it to `[min, max]` and returns it.

```python
from libpower.cntl_2p2z import Coefficients, Controller2p2z

coeffs = Coefficients.with_default_values()
coeffs.max = 1.0
coeffs.min = -1.0
controller = Controller2p2z(coeffs)

out = controller.calculate(1.0, 0.1)   # reference, feedback
controller.error                       # 0.9
controller.output                      # same as out
controller.variables                   # the full Variables history
controller.reset()                     # clears all history
```

`libpower.cntl_3p3z.Controller3p3z` works the same way with one more pole
and zero.

## PI controller

`ControllerPI(kp=0.2, ki=0.1)` (or `ControllerPI.with_gains(kp, ki)`)
computes a proportional and an integral term; the difference between the
clamped and unclamped output is fed back into the integrator on the next
step. `set_gains` replaces the gains and `set_limits(u_min, u_max)` sets the
output range.

```python
from libpower.cntl_pi import ControllerPI

pi = ControllerPI.with_gains(1.0, 0.1)
pi.set_limits(-0.5, 0.5)
duty = pi.calculate(1.0, 0.0)          # reference, feedback
pi.proportional_term, pi.integral_term, pi.output
pi.reset()
```

## PID controller

`ControllerPID(kp, ki, kd).update(setpoint, current_position, current_time)`
integrates the error over the elapsed time and takes the derivative of the
measured position (not of the error). The derivative term is left out on the
first update. If `current_time` is not later than the time of the previous
accepted update (initially 0.0), the call returns `0.0` and changes nothing.

```python
from libpower.cntl_pid import ControllerPID

pid = ControllerPID(1.0, 0.1, 0.01)
command = pid.update(10.0, 8.0, 0.1)   # setpoint, position, time in seconds
pid.cumulative_error, pid.last_position
pid.reset()
```

## Filters

Butterworth filters take an order, a cutoff frequency and a sample rate. The
order is clamped to 2..8 and rounded down to an even number; `order` reports
the result and `n` the number of second-order sections. Before `init` is
called a filter has no sections and returns its input unchanged.

```python
from libpower.butterworth_lpf import ButterworthLPF

lpf = ButterworthLPF()
lpf.init(4, 1000.0, 44100.0)           # order, cutoff, sample rate
y = lpf.process(0.5)
lpf.reset()                            # zero the state
lpf.w0, lpf.w1, lpf.w2                 # per-section state lists
```

Chebyshev filters are created with a capacity, the largest number of
sections they may hold, and configured with order, ripple factor epsilon,
sample rate and cutoff frequency. The output is scaled by `2 / epsilon`.
`init` raises `ValueError` for an odd or negative order, an order larger than
twice the capacity, a non-positive epsilon, or a cutoff that is not strictly
between 0 and half the sample rate. Before a successful `init` the filter
outputs zero. `m` is the number of sections.

```python
from libpower.chebyshev_hpf import ChebyshevHPF

hpf = ChebyshevHPF(4)
hpf.init(4, 0.1, 44100.0, 1000.0)      # order, epsilon, sample rate, cutoff
y = hpf.process(0.5)
```

## Maximum power point tracking

Both trackers keep a voltage reference `mppt_v_out` that moves by
`step_size` and is held within `mppt_v_out_min` and `mppt_v_out_max`. These
three settings start at 0.0, so set them before use. The first call to
`calculate(pv_i, pv_v)` only primes the stored history and ignores its
arguments.

```python
from libpower.perturb_and_observe import MPPT

mppt = MPPT()
mppt.step_size = 0.5
mppt.mppt_v_out_min = 0.0
mppt.mppt_v_out_max = 40.0

mppt.calculate(1.0, 10.0)              # PV current, PV voltage (priming)
mppt.calculate(1.5, 12.0)
mppt.pv_i, mppt.pv_v, mppt.pv_power, mppt.mppt_v_out
```

The perturb and observe tracker moves the reference only when the power has
risen by more than `delta_p_min`: up if the voltage rose, down otherwise. The
incremental conductance tracker (`libpower.incremental_conductance.MPPT`)
moves it up when current and voltage change in the same direction and down
otherwise, and exposes `pv_i`, `pv_v`, `pv_i_high`, `pv_v_high` and
`mppt_v_out`.

## Reference-frame transforms

Each transform is a small object whose inputs are set as attributes;
`calculate()` writes the outputs. The square root of three is taken as
1.732.

```python
import math
from libpower.transform import Clarke, Park

clarke = Clarke(a=1.0, b=-0.5, c=-0.5)
clarke.calculate()                     # sets alpha, beta and zero

park = Park(alpha=clarke.alpha, beta=clarke.beta,
            sin=math.sin(0.3), cos=math.cos(0.3))
park.calculate()                       # sets d, q and z
```

`IClarke` computes `a`, `b`, `c` from `alpha` and `beta`; `IPark` computes
`alpha` and `beta` from `d`, `q`, `sin` and `cos`.

## Test signals

`Signal(wave_type, amplitude, frequency, num_samples)` generates
`num_samples` samples spanning one unit of time and measures them.
`set_phase` (degrees) and `set_duty_cycle` (clamped to 0..1, used by
`SignalType.PWM`) regenerate the samples. `samples` returns a copy of the
samples and `metrics` a `SignalMetrics` with peak-to-peak, max, min,
average, DC and AC RMS, positive and negative duty cycle, rise and fall
time, crest factor and, for sine waves, total harmonic distortion over the
2nd to 5th harmonics.

```python
from libpower.signal import Signal, SignalType

signal = Signal(SignalType.PWM, 1.0, 1.0, 1000)
signal.set_duty_cycle(0.25)
signal.metrics.duty_cycle_pos          # about 0.25
```

## What is not included

There is no phase-locked loop and no single-step abc-to-dq0 or dq0-to-abc
transform; chain `Clarke` and `Park` (or `IPark` and `IClarke`) instead.
Everything works one sample at a time on Python floats; there is no
array processing.

## Running the tests

```
pip install -e ".[test]"
pytest
```