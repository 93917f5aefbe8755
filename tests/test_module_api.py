import processlog
from processlog.core import registry as registry_module


def test_get_registry_returns_process_wide_instance():
    assert processlog.get_registry() is processlog.get_registry()


def test_module_functions_delegate_to_default_registry(monkeypatch, registry, presenter):
    monkeypatch.setattr(registry_module, "_default_registry", registry)

    handle = processlog.start("upload", description="Uploading files")
    processlog.log("upload", "file 1")
    processlog.toggle_logging("upload", False)
    processlog.log("upload", "hidden")
    processlog.toggle_logging("upload", True)
    duration = processlog.end("upload")

    assert handle.name == "upload"
    assert presenter.kinds() == ["start", "log", "end"]
    assert duration == 0
    assert processlog.end("upload") is None


def test_unknown_process_error_is_a_key_error():
    error = processlog.UnknownProcessError("ghost")

    assert isinstance(error, KeyError)
    assert isinstance(error, processlog.ProcessLogError)
    assert str(error) == "No active process named 'ghost'"
