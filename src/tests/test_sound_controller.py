import pygame
import pytest

from audio_system import ButtonSounds, SoundController
from audio_system.sound_controller import _sine_wave
from button_system import AnimationCategory, Button


@pytest.fixture(autouse=True)
def dummy_audio(monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield
    pygame.mixer.quit()


def test_missing_cue_files_rejected(logger, tmp_path):
    (tmp_path / "red.wav").write_bytes(b"")

    with pytest.raises(FileNotFoundError) as excinfo:
        SoundController(logger, sounds_folder=str(tmp_path))

    assert "green.wav" in str(excinfo.value)
    assert "red.wav" not in str(excinfo.value)


def test_synthesizes_one_tone_per_button(logger):
    sound = SoundController(logger, volume=0.25)

    assert set(sound._sound_objects) == set(ButtonSounds)
    for sound_obj in sound._sound_objects.values():
        assert sound_obj.get_volume() == pytest.approx(0.25, abs=0.01)

    for button in Button:
        sound.play_cue(button, AnimationCategory.LIT)

    sound.cleanup()
    assert sound._sound_objects == {}


def test_set_volume_applies_to_every_cue(logger):
    sound = SoundController(logger)
    sound.set_volume(0.5)

    assert sound.volume == 0.5
    for sound_obj in sound._sound_objects.values():
        assert sound_obj.get_volume() == pytest.approx(0.5, abs=0.01)
    sound.cleanup()


def test_sine_wave_fades_in_and_out():
    samples = _sine_wave(440.0, 0.1, 8000, 2)

    assert len(samples) == int(0.1 * 8000) * 2
    assert samples[0] == samples[1] == 0
    assert samples[-1] == samples[-2] == 0
    assert max(samples) > 0
