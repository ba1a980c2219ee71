from routedoc.config import DEFAULT_CONFIG
from routedoc.fs_scan import module_title, read_source, scan_routes


def test_scan_routes_skips_ignored_and_non_js(tmp_path):
	for name in ["session.js", "account.js", "index.js", "validators.js", "notes.md"]:
		(tmp_path / name).write_text("// route module\n")
	(tmp_path / "utils.js").mkdir()

	paths = scan_routes(str(tmp_path))
	assert [p.rsplit("/", 1)[-1] for p in paths] == ["account.js", "session.js"]

	paths = scan_routes(str(tmp_path), DEFAULT_CONFIG.with_ignored(["session.js"]))
	assert [p.rsplit("/", 1)[-1] for p in paths] == ["account.js"]
	assert read_source(paths[0]) == "// route module\n"


def test_module_title():
	assert module_title("lib/routes/account.js") == "Account"
	assert module_title("recovery-email.js") == "Recovery-email"
