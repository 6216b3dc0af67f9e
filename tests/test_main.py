from msix_assets.main import main, parse_args
from msix_assets.models.variant_catalog import VARIANT_CATALOG


def test_parse_args_defaults(tmp_path):
    a = parse_args(["--build-dir", str(tmp_path)])
    assert a.build_dir == tmp_path
    assert a.logo is None
    assert a.trim is True
    assert a.workers is None


def test_generates_icons(make_logo, tmp_path):
    build = tmp_path / "build"
    code = main(["--build-dir", str(build), "--logo", str(make_logo()), "--no-trim", "--workers", "4"])
    assert code == 0
    assert len(list((build / "Images").iterdir())) == len(VARIANT_CATALOG)


def test_copies_defaults_without_logo(defaults_dir, tmp_path):
    build = tmp_path / "build"
    assert main(["--build-dir", str(build), "--defaults-dir", str(defaults_dir)]) == 0
    assert (build / "Images" / "StoreLogo.scale-100.png").is_file()


def test_failed_run_exit_code(tmp_path):
    code = main(["--build-dir", str(tmp_path / "build"), "--logo", str(tmp_path / "missing.png")])
    assert code == 1


def test_rejects_non_positive_workers(tmp_path):
    assert main(["--build-dir", str(tmp_path), "--workers", "0"]) == 2


def test_unusable_build_dir_exit_code(tmp_path):
    build = tmp_path / "build"
    build.write_text("not a folder", encoding="utf-8")
    assert main(["--build-dir", str(build), "--logo", str(tmp_path / "logo.png")]) == 1
