import signal

from gw import constants


def test_interrupt_shim_replaces_default_handler(monkeypatch) -> None:
    monkeypatch.setattr(constants, "IGNORE_INTERRUPT", True)
    previous = signal.getsignal(signal.SIGINT)
    try:
        constants.install_interrupt_shim()
        handler = signal.getsignal(signal.SIGINT)
        assert handler is not signal.default_int_handler
        assert handler is not previous
        # the handler swallows the interrupt
        assert handler(signal.SIGINT, None) is None
    finally:
        signal.signal(signal.SIGINT, previous)


def test_interrupt_shim_noop_when_disabled(monkeypatch) -> None:
    monkeypatch.setattr(constants, "IGNORE_INTERRUPT", False)
    previous = signal.getsignal(signal.SIGINT)

    constants.install_interrupt_shim()

    assert signal.getsignal(signal.SIGINT) is previous


def test_wrapper_name_matches_platform() -> None:
    expected = "gradlew.bat" if constants.IS_WINDOWS else "gradlew"
    assert constants.WRAPPER_NAME == expected
