import pytest

from blockworld.settings import (
    DEFAULT_FOV,
    DEFAULT_RENDER_DISTANCE,
    DEFAULT_VOLUME,
    MAX_FOV,
    MAX_RENDER_DISTANCE,
    MAX_VOLUME,
    MIN_FOV,
    MIN_RENDER_DISTANCE,
    MIN_VOLUME,
    Settings,
)


def test_defaults():
    s = Settings()
    assert s.render_distance == DEFAULT_RENDER_DISTANCE
    assert s.fov == DEFAULT_FOV
    assert s.volume == DEFAULT_VOLUME


def test_clamping():
    s = Settings()
    s.render_distance = MAX_RENDER_DISTANCE + 100
    assert s.render_distance == MAX_RENDER_DISTANCE
    s.render_distance = MIN_RENDER_DISTANCE - 100
    assert s.render_distance == MIN_RENDER_DISTANCE
    s.fov = MAX_FOV + 50
    assert s.fov == MAX_FOV
    s.fov = MIN_FOV - 50
    assert s.fov == MIN_FOV
    s.volume = MAX_VOLUME + 3.0
    assert s.volume == MAX_VOLUME
    s.volume = MIN_VOLUME - 3.0
    assert s.volume == MIN_VOLUME


def test_in_range_values_pass_through():
    s = Settings()
    s.fov = MIN_FOV + 1
    assert s.fov == MIN_FOV + 1
    s.volume = 0.5
    assert s.volume == 0.5


def test_save_format(tmp_path):
    path = tmp_path / "settings.txt"
    s = Settings()
    s.volume = 0.5
    s.save(path)
    assert path.read_text().splitlines() == [
        f"render_distance={DEFAULT_RENDER_DISTANCE}",
        f"fov={DEFAULT_FOV}",
        "volume=0.5",
    ]


def test_round_trip(tmp_path):
    path = tmp_path / "settings.txt"
    s = Settings()
    s.render_distance = MIN_RENDER_DISTANCE + 1
    s.fov = MAX_FOV - 1
    s.volume = 0.25
    s.save(path)

    other = Settings()
    other.load(path)
    assert (other.render_distance, other.fov, other.volume) == (
        s.render_distance,
        s.fov,
        s.volume,
    )


def test_load_skips_comments_and_unknown(tmp_path):
    path = tmp_path / "settings.txt"
    path.write_text(
        "# a comment\n\nno_equals_sign\ncolour=blue\n"
        f"fov={MIN_FOV + 2}\nvolume=0.75\n"
    )
    s = Settings()
    s.load(path)
    assert s.fov == MIN_FOV + 2
    assert s.volume == 0.75
    assert s.render_distance == DEFAULT_RENDER_DISTANCE


def test_load_clamps(tmp_path):
    path = tmp_path / "settings.txt"
    path.write_text(f"render_distance={MAX_RENDER_DISTANCE + 1000}\nvolume=-4\n")
    s = Settings()
    s.load(path)
    assert s.render_distance == MAX_RENDER_DISTANCE
    assert s.volume == MIN_VOLUME


def test_load_reads_leading_number(tmp_path):
    path = tmp_path / "settings.txt"
    path.write_text(f"fov= {MIN_FOV + 3}deg\n")
    s = Settings()
    s.load(path)
    assert s.fov == MIN_FOV + 3


def test_load_bad_value_raises(tmp_path):
    path = tmp_path / "settings.txt"
    path.write_text("fov=abc\n")
    with pytest.raises(ValueError):
        Settings().load(path)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Settings().load(tmp_path / "missing.txt")