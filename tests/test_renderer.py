import io

import numpy as np
from projectile_sim.renderer import ConsoleRenderer, NullRenderer, BufferedRenderer
from projectile_sim.types import State, Sample


def test_console_layout():
    out = io.StringIO()
    r = ConsoleRenderer(out)
    r.render_sample(Sample(tick=1, time=0.1, state=State(1.5, 2.25, -3.0, 4.0)))
    r.finish()
    assert out.getvalue() == (
        "t = 0.10000\n"
        "\ty = 1.500000000\ty' = -3.000000000\n"
        "\tx = 2.250000000\tx' = 4.000000000\n"
        "End of simulation...\n"
    )


def test_null_renderer_accepts_samples():
    r = NullRenderer()
    r.render_sample(Sample(tick=1, time=0.1, state=State()))
    r.finish()


def test_buffered_rows_and_clear():
    r = BufferedRenderer()
    assert r.as_array().shape == (0, 5)

    r.render_sample(Sample(1, 0.5, State(1.0, 2.0, 3.0, 4.0)))
    r.render_sample(Sample(2, 1.0, State(5.0, 6.0, 7.0, 8.0)))
    arr = r.as_array()
    assert arr.dtype == np.float64
    assert arr.tolist() == [[0.5, 1.0, 2.0, 3.0, 4.0], [1.0, 5.0, 6.0, 7.0, 8.0]]

    # draw_state outside a frame is ignored
    r.draw_state(State(9.0, 9.0, 9.0, 9.0))
    assert len(r.rows) == 2

    r.clear()
    assert r.rows == []
