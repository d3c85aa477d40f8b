"""End-to-end tests: run palette-forge main() with argv and inspect stdout/exit codes."""

import json
import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from palette_forge.__main__ import main
from palette_forge.registry import all_commands, get


SETTINGS = ('PALETTE_FORGE_FORMAT', 'PALETTE_FORGE_HARMONY', 'PALETTE_FORGE_SEED')


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run from an empty repo so no stray .env or settings leak in or out."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    for key in SETTINGS:
        monkeypatch.delenv(key, raising=False)
    yield tmp_path
    # load_env writes straight into os.environ
    for key in SETTINGS:
        os.environ.pop(key, None)


def _run_json(capsys: pytest.CaptureFixture, argv: list[str]) -> dict:
    main(argv)
    return json.loads(capsys.readouterr().out)


class TestRegistry:
    def test_discovers_commands(self) -> None:
        assert set(all_commands()) == {'contrast', 'convert', 'palette', 'scale'}

    def test_unknown_command(self) -> None:
        with pytest.raises(KeyError, match='Available'):
            get('nope')


class TestPaletteCommand:
    def test_complementary(self, capsys: pytest.CaptureFixture) -> None:
        obj = _run_json(capsys, ['palette', '--base', '#3b82f6', '--harmony', 'complementary', '--json'])
        pal = obj['palette']
        assert pal['mode'] == 'complementary'
        assert pal['effective'] == 'complementary'
        assert [sw['hsl'] for sw in pal['swatches']] == [
            {'h': 217, 's': 91, 'l': 60},
            {'h': 37, 's': 91, 'l': 60},
            {'h': 37, 's': 91, 'l': 80},
            {'h': 37, 's': 91, 'l': 40},
            {'h': 217, 's': 91, 'l': 30},
        ]

    def test_format_option(self, capsys: pytest.CaptureFixture) -> None:
        obj = _run_json(capsys, ['palette', '--harmony', 'triadic', '--format', 'hsl', '--json'])
        assert obj['palette']['swatches'][0]['value'] == 'hsl(217, 91%, 60%)'

    def test_format_from_env(self, capsys: pytest.CaptureFixture, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('PALETTE_FORGE_FORMAT', 'rgb')
        obj = _run_json(capsys, ['palette', '--harmony', 'analogous', '--json'])
        assert obj['palette']['swatches'][0]['value'].startswith('rgb(')

    def test_format_from_dotenv(self, capsys: pytest.CaptureFixture, isolated_env: Path) -> None:
        (isolated_env / '.env').write_text('PALETTE_FORGE_FORMAT=cmyk\n')
        obj = _run_json(capsys, ['palette', '--harmony', 'analogous', '--json'])
        assert obj['palette']['swatches'][0]['value'].startswith('cmyk(')

    def test_seed_is_reproducible(self, capsys: pytest.CaptureFixture) -> None:
        first = _run_json(capsys, ['palette', '--seed', '5', '--randomize', '2', '--json'])
        second = _run_json(capsys, ['palette', '--seed', '5', '--randomize', '2', '--json'])
        assert first == second

    def test_lock_survives_randomize(self, capsys: pytest.CaptureFixture) -> None:
        argv = ['palette', '--base', '#3b82f6', '--harmony', 'analogous', '--lock', '2', '--randomize', '3']
        obj = _run_json(capsys, [*argv, '--seed', '1', '--json'])
        slot2 = obj['palette']['swatches'][2]
        assert slot2['locked'] is True
        assert slot2['hsl'] == {'h': 187, 's': 91, 'l': 60}

    def test_lock_base_keeps_subject(self, capsys: pytest.CaptureFixture) -> None:
        obj = _run_json(capsys, ['palette', '--base', '#ff0000', '--lock', '0', '--randomize', '4', '--json'])
        assert obj['subject'] == '#ff0000'

    def test_shades(self, capsys: pytest.CaptureFixture) -> None:
        obj = _run_json(capsys, ['palette', '--harmony', 'complementary', '--shades', '1', '--json'])
        steps = obj['scale']['steps']
        assert len(steps) == 10
        assert next(s for s in steps if s['key'] == 500)['hsl'] == {'h': 37, 's': 91, 'l': 60}

    def test_text_output(self, capsys: pytest.CaptureFixture) -> None:
        main(['palette', '--harmony', 'triadic'])
        out = capsys.readouterr().out
        assert out.startswith('palette-forge palette: #3c83f6')
        assert 'harmony: triadic' in out

    def test_invalid_base(self, capsys: pytest.CaptureFixture) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['palette', '--base', 'blue'])
        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert 'invalid colour' in captured.err
        assert captured.out == ''

    def test_bad_lock_slot(self, capsys: pytest.CaptureFixture) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['palette', '--lock', '9'])
        assert exc.value.code == 1
        assert 'cannot lock slot 9' in capsys.readouterr().err

    def test_bad_shades_slot_prints_no_palette(self, capsys: pytest.CaptureFixture) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['palette', '--harmony', 'triadic', '--shades', '9', '--json'])
        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert 'cannot show shades of slot 9' in captured.err
        assert captured.out == ''


class TestSeedReporting:
    def test_explicit_seed_reported(self, capsys: pytest.CaptureFixture) -> None:
        main(['palette', '--seed', '5', '--json'])
        assert 'palette-forge: seed 5' in capsys.readouterr().err.splitlines()

    def test_env_seed_reported(self, capsys: pytest.CaptureFixture, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('PALETTE_FORGE_SEED', '77')
        main(['palette', '--json'])
        assert 'palette-forge: seed 77' in capsys.readouterr().err.splitlines()

    def test_unseeded_run_can_be_replayed(self, capsys: pytest.CaptureFixture) -> None:
        main(['palette', '--randomize', '3', '--json'])
        captured = capsys.readouterr()
        seed_lines = [ln for ln in captured.err.splitlines() if ln.startswith('palette-forge: seed ')]
        assert len(seed_lines) == 1
        seed = seed_lines[0].removeprefix('palette-forge: seed ')
        replay = _run_json(capsys, ['palette', '--randomize', '3', '--seed', seed, '--json'])
        assert replay == json.loads(captured.out)

    def test_bad_env_seed_warns(self, capsys: pytest.CaptureFixture, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('PALETTE_FORGE_SEED', 'abc')
        main(['palette', '--randomize', '1', '--json'])
        err = capsys.readouterr().err
        assert "ignoring PALETTE_FORGE_SEED='abc'" in err
        assert 'palette-forge: seed ' in err

    def test_seed_never_on_stdout(self, capsys: pytest.CaptureFixture) -> None:
        main(['palette', '--seed', '5', '--json'])
        assert 'seed' not in capsys.readouterr().out


class TestScaleCommand:
    def test_json(self, capsys: pytest.CaptureFixture) -> None:
        obj = _run_json(capsys, ['scale', '#3b82f6', '--json'])
        steps = obj['scale']['steps']
        assert [s['key'] for s in steps] == [50, 100, 200, 300, 400, 500, 600, 700, 800, 900]
        assert steps[5]['hsl'] == {'h': 217, 's': 91, 'l': 60}
        assert steps[6]['hsl'] == {'h': 217, 's': 96, 'l': 47}

    def test_invalid_colour(self) -> None:
        with pytest.raises(SystemExit):
            main(['scale', '#12'])


class TestContrastCommand:
    def test_white_on_black(self, capsys: pytest.CaptureFixture) -> None:
        obj = _run_json(capsys, ['contrast', '#fff', '#000', '--json'])
        assert obj['contrast']['ratio'] == 21.0
        assert all(obj['contrast']['levels'].values())

    def test_require_fails(self, capsys: pytest.CaptureFixture) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['contrast', '#ffffff', '#3b82f6', '--require', 'aaa'])
        assert exc.value.code == 1
        out = capsys.readouterr().out
        assert 'FAIL 1/1' in out

    def test_require_passes(self, capsys: pytest.CaptureFixture) -> None:
        obj = _run_json(capsys, ['contrast', '#ffffff', '#3b82f6', '--require', 'aa-large', '--json'])
        assert obj['contrast']['pass'] is True
        assert obj['summary'] == {'total': 1, 'pass': 1, 'fail': 0}


class TestConvertCommand:
    def test_all_formats(self, capsys: pytest.CaptureFixture) -> None:
        obj = _run_json(capsys, ['convert', '#3b82f6', '--json'])
        conv = obj['convert']
        assert conv['hex'] == '#3c83f6'
        assert conv['hsl'] == 'hsl(217, 91%, 60%)'
        assert conv['rgb'] == 'rgb(60, 131, 246)'
        assert conv['hsb'].startswith('hsb(217, ')
        assert conv['cmyk'].startswith('cmyk(')
        assert conv['name']


class TestHelp:
    def test_help_command(self, capsys: pytest.CaptureFixture) -> None:
        main(['help', 'scale'])
        assert 'Tonal scale (50-900)' in capsys.readouterr().out

    def test_help_lists_commands(self, capsys: pytest.CaptureFixture) -> None:
        main(['help'])
        out = capsys.readouterr().out
        for name in ('palette', 'scale', 'contrast', 'convert'):
            assert name in out

    def test_help_unknown(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['help', 'nope'])
        assert exc.value.code == 1

    def test_no_command(self, capsys: pytest.CaptureFixture) -> None:
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1
