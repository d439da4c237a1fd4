import pytest

from dodgedrop.quality import Quality, QualityLevel


def test_default_start_is_high():
    assert Quality().level is QualityLevel.HIGH


def test_single_low_sample_drops_to_low():
    q = Quality()
    q.update_on_fps_sample(20.0)
    assert q.level is QualityLevel.LOW


def test_one_high_sample_does_not_recover():
    q = Quality(QualityLevel.LOW)
    q.update_on_fps_sample(59.0)
    assert q.level is QualityLevel.LOW


def test_two_high_samples_recover():
    q = Quality(QualityLevel.LOW)
    q.update_on_fps_sample(59.0)
    q.update_on_fps_sample(59.0)
    assert q.level is QualityLevel.HIGH


def test_middle_band_breaks_high_streak():
    q = Quality(QualityLevel.LOW)
    q.update_on_fps_sample(59.0)
    q.update_on_fps_sample(35.0)
    q.update_on_fps_sample(59.0)
    assert q.level is QualityLevel.LOW
    q.update_on_fps_sample(59.0)
    assert q.level is QualityLevel.HIGH


def test_low_sample_breaks_high_streak():
    q = Quality(QualityLevel.LOW)
    q.update_on_fps_sample(59.0)
    q.update_on_fps_sample(10.0)
    q.update_on_fps_sample(59.0)
    assert q.level is QualityLevel.LOW


@pytest.mark.parametrize("fps", [30.0, 35.0, 40.0])
def test_middle_band_keeps_level(fps):
    high = Quality(QualityLevel.HIGH)
    low = Quality(QualityLevel.LOW)
    for _ in range(3):
        high.update_on_fps_sample(fps)
        low.update_on_fps_sample(fps)
    assert high.level is QualityLevel.HIGH
    assert low.level is QualityLevel.LOW


def test_force_clears_streak():
    q = Quality(QualityLevel.LOW)
    q.update_on_fps_sample(59.0)
    q.force(QualityLevel.LOW)
    q.update_on_fps_sample(59.0)
    assert q.level is QualityLevel.LOW


def test_force_sets_level():
    q = Quality()
    q.force(QualityLevel.LOW)
    assert q.level is QualityLevel.LOW


def test_reset_sets_start_level():
    q = Quality()
    q.update_on_fps_sample(5.0)
    q.reset()
    assert q.level is QualityLevel.HIGH
    q.reset(QualityLevel.LOW)
    assert q.level is QualityLevel.LOW