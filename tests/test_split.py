import pytest

from vinacore.fileio import FileError, ParseError
from vinacore.split import (
    Model,
    default_prefix,
    main,
    parse_multimodel_pdbqt,
    write_multimodel_pdbqt,
    write_pdbqt,
)

SAMPLE = (
    "MODEL 1\n"
    "REMARK VINA RESULT\n"
    "ATOM      1  C   LIG\n"
    "BEGIN_RES ARG A  10\n"
    "ATOM      2  N   ARG\n"
    "END_RES ARG A  10\n"
    "ENDMDL\n"
    "MODEL 2\n"
    "ATOM      1  C   LIG\n"
    "ENDMDL\n"
)


def _write(tmp_path, text, name="input.pdbqt"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_default_prefix_strips_pdbqt_suffix():
    assert default_prefix("dock.pdbqt", "_ligand_") == "dock_ligand_"


def test_default_prefix_keeps_other_names():
    assert default_prefix("dock.pdb", "_flex_") == "dock.pdb_flex_"


def test_parse_separates_ligand_and_flex(tmp_path):
    models = parse_multimodel_pdbqt(_write(tmp_path, SAMPLE))
    assert len(models) == 2
    assert models[0].ligand == ["REMARK VINA RESULT", "ATOM      1  C   LIG"]
    assert models[0].flex == [
        "BEGIN_RES ARG A  10",
        "ATOM      2  N   ARG",
        "END_RES ARG A  10",
    ]
    assert models[1] == Model(ligand=["ATOM      1  C   LIG"], flex=[])


def test_parse_empty_file_gives_no_models(tmp_path):
    assert parse_multimodel_pdbqt(_write(tmp_path, "")) == []


@pytest.mark.parametrize(
    "text, line, reason",
    [
        ("MODEL\nMODEL\n", 2, "Misplaced MODEL tag"),
        ("ENDMDL\n", 1, "Misplaced ENDMDL tag"),
        ("BEGIN_RES\n", 1, "Misplaced BEGIN_RES tag"),
        ("MODEL\nEND_RES\n", 2, "Misplaced END_RES tag"),
        ("ATOM\n", 1, "Input occurs outside MODEL"),
        ("MODEL\nBEGIN_RES\nENDMDL\n", 3, "Misplaced ENDMDL tag"),
        ("MODEL\nATOM\n", 3, "Missing ENDMDL tag"),
    ],
)
def test_parse_errors(tmp_path, text, line, reason):
    with pytest.raises(ParseError) as info:
        parse_multimodel_pdbqt(_write(tmp_path, text))
    assert info.value.line == line
    assert info.value.reason == reason


def test_parse_missing_file(tmp_path):
    with pytest.raises(FileError) as info:
        parse_multimodel_pdbqt(tmp_path / "absent.pdbqt")
    assert info.value.is_input


def test_write_pdbqt_round_trip(tmp_path):
    target = tmp_path / "out.pdbqt"
    write_pdbqt(["A", "B"], target)
    assert target.read_text() == "A\nB\n"


def test_write_pdbqt_skips_empty(tmp_path):
    target = tmp_path / "out.pdbqt"
    write_pdbqt([], target)
    assert not target.exists()


def test_write_multimodel_pads_numbers(tmp_path):
    models = [Model(ligand=[f"L{k}"]) for k in range(10)]
    write_multimodel_pdbqt(models, str(tmp_path / "lig_"), str(tmp_path / "flex_"))
    names = sorted(p.name for p in tmp_path.iterdir())
    assert names[0] == "lig_01.pdbqt"
    assert names[-1] == "lig_10.pdbqt"
    assert len(names) == 10
    assert (tmp_path / "lig_03.pdbqt").read_text() == "L2\n"


def test_split_round_trip(tmp_path):
    source = _write(tmp_path, SAMPLE)
    models = parse_multimodel_pdbqt(source)
    write_multimodel_pdbqt(models, str(tmp_path / "l_"), str(tmp_path / "f_"))
    assert (tmp_path / "l_1.pdbqt").read_text().splitlines() == models[0].ligand
    assert (tmp_path / "f_1.pdbqt").read_text().splitlines() == models[0].flex
    assert not (tmp_path / "f_2.pdbqt").exists()


def test_main_with_default_prefixes(tmp_path, capsys):
    source = _write(tmp_path, SAMPLE, "dock.pdbqt")
    assert main(["--input", str(source)]) == 0
    out = capsys.readouterr().out
    assert f"Prefix for ligands will be {tmp_path / 'dock_ligand_'}" in out
    assert (tmp_path / "dock_ligand_1.pdbqt").exists()
    assert (tmp_path / "dock_ligand_2.pdbqt").exists()
    assert (tmp_path / "dock_flex_1.pdbqt").exists()


def test_main_with_explicit_prefixes(tmp_path):
    source = _write(tmp_path, SAMPLE)
    status = main(
        [f"--input={source}", "--ligand", str(tmp_path / "x_"), "--flex", str(tmp_path / "y_")]
    )
    assert status == 0
    assert (tmp_path / "x_2.pdbqt").read_text() == "ATOM      1  C   LIG\n"


def test_main_missing_input(capsys):
    assert main([]) == 1
    assert "Missing input." in capsys.readouterr().err


def test_main_help_and_version(capsys):
    assert main(["--help"]) == 0
    assert "prefix for ligands" in capsys.readouterr().out
    assert main(["--version"]) == 0
    assert "1.1.2" in capsys.readouterr().out


def test_main_rejects_unknown_and_abbreviated_options(capsys):
    assert main(["--bogus"]) == 1
    assert "Command line parse error" in capsys.readouterr().err
    assert main(["--inp", "x"]) == 1


def test_main_reports_unreadable_input(tmp_path, capsys):
    assert main(["--input", str(tmp_path / "absent.pdbqt")]) == 1
    assert "could not open" in capsys.readouterr().err


def test_main_reports_parse_error(tmp_path, capsys):
    source = _write(tmp_path, "ATOM\n")
    assert main(["--input", str(source)]) == 1
    assert "Input occurs outside MODEL" in capsys.readouterr().err