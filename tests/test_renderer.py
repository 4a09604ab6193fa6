import pygame
import pytest

from life_visualizer.config import VisualizerConfig
from life_visualizer.renderers.pygame_grid import PygameGridRenderer
from life_visualizer.simulation.simulator import LifeSimulator


@pytest.fixture
def config():
    return VisualizerConfig(dimension=8, cell_size=10, pattern="blinker")


@pytest.fixture
def renderer(config):
    r = PygameGridRenderer(config)
    pygame.event.clear()
    yield r
    r.cleanup()


def post_key(key):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key, mod=0))


def post_click(pos, button=1):
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)
    pygame.event.post(event)


def test_cell_at_pixel(renderer):
    assert renderer.cell_at_pixel(0, 0) == (0, 0)
    assert renderer.cell_at_pixel(19, 31) == (3, 1)
    assert renderer.cell_at_pixel(79, 79) == (7, 7)
    assert renderer.cell_at_pixel(80, 5) is None
    assert renderer.cell_at_pixel(5, 80) is None
    assert renderer.cell_at_pixel(-1, 5) is None


@pytest.mark.parametrize(
    "key, flag",
    [
        (pygame.K_SPACE, "toggle_pause"),
        (pygame.K_RIGHT, "step_once"),
        (pygame.K_n, "step_once"),
        (pygame.K_r, "reset"),
        (pygame.K_EQUALS, "speed_up"),
        (pygame.K_MINUS, "speed_down"),
        (pygame.K_q, "should_quit"),
        (pygame.K_ESCAPE, "should_quit"),
    ],
)
def test_key_bindings(renderer, key, flag):
    post_key(key)
    result = renderer.poll_input()
    assert getattr(result, flag) is True


def test_clicks_map_to_cells(renderer):
    post_click((25, 45))
    post_click((500, 5))  # Over the stats panel
    post_click((5, 5), button=3)

    result = renderer.poll_input()
    assert result.toggled_cells == [(4, 2)]


def test_render_frame(renderer, config):
    sim = LifeSimulator(config)
    post_key(pygame.K_SPACE)

    result = renderer.render(
        sim.get_grid(), sim.get_generation(), sim.lifetime, sim.paused, sim.tick_rate_ms
    )

    assert result.toggle_pause
    # Live cells are drawn black, dead cells white
    assert renderer.screen.get_at((4 * 10 + 5, 4 * 10 + 5))[:3] == (0, 0, 0)
    assert renderer.screen.get_at((0 * 10 + 5, 7 * 10 + 5))[:3] == (255, 255, 255)


def test_render_with_neighbor_overlay():
    config = VisualizerConfig(
        dimension=8, pattern="block", debug=True, show_stats=False
    )
    renderer = PygameGridRenderer(config)
    try:
        assert renderer.debug_font is not None
        sim = LifeSimulator(config)
        result = renderer.render(sim.get_grid(), paused=False)
        assert not result.should_quit
    finally:
        renderer.cleanup()
