import pytest

from printing.errors import (
    InvalidOptionError,
    InvalidPrinterSettingError,
    PrinterNotDefinedError,
    UnsupportedDpiError,
    UnsupportedMediaError,
    UnsupportedPaperError,
)
from printing.print_job import PrintJob
from tests.fakes.fake_backend import FakeBackendClient
from tests.fakes.fake_directory import make_printer


def _job(printer, *, qty=1, copies=None, **options):
    job = PrintJob(client=FakeBackendClient(), default_options={}, printer=printer)
    job.set_quantity(qty)
    if copies is not None:
        job.set_options({"copies": copies})
    job.set_options(options)
    return job


def test_no_copies_leaves_quantity_and_options_alone():
    job = _job(make_printer(max_copies=7), qty=3, paper="A4")

    job.check_settings()

    assert job.quantity == 3
    assert job.options.to_dict() == {"paper": "A4"}
    assert job.overflow_job is None


def test_split_with_remainder_creates_overflow_job():
    job = _job(make_printer(max_copies=7), qty=3, copies=5)

    job.check_settings()

    assert job.quantity == 2
    assert job.options.copies == 7

    overflow = job.overflow_job
    assert overflow is not None
    assert overflow.quantity == 1
    assert overflow.options.copies == 1


def test_split_without_remainder_has_no_overflow_job():
    job = _job(make_printer(max_copies=10), qty=2, copies=5)

    job.check_settings()

    assert job.quantity == 1
    assert job.options.copies == 10
    assert job.overflow_job is None


@pytest.mark.parametrize(
    "qty, copies, max_copies, expected_qty, expected_overflow",
    [
        (1, 1, 4, 0, 1),
        (4, 3, 5, 2, 2),
        (6, 2, 3, 4, None),
        (10, 9, 10, 9, None),
    ],
)
def test_split_arithmetic(qty, copies, max_copies, expected_qty, expected_overflow):
    job = _job(make_printer(max_copies=max_copies), qty=qty, copies=copies)

    job.check_settings()

    assert job.quantity == expected_qty
    assert job.options.copies == max_copies
    if expected_overflow is None:
        assert job.overflow_job is None
    else:
        assert job.overflow_job.options.copies == expected_overflow
        assert job.overflow_job.quantity == 1


def test_split_only_triggers_when_printer_max_is_above_requested_copies():
    # Requested copies at or above the printer maximum are sent untouched.
    for copies in (7, 12):
        job = _job(make_printer(max_copies=7), qty=2, copies=copies)

        job.check_settings()

        assert job.quantity == 2
        assert job.options.copies == copies
        assert job.overflow_job is None


def test_overflow_job_is_a_copy_of_the_parent_attributes():
    job = _job(make_printer(printer_id=42, max_copies=7), qty=3, copies=5, paper="A4", duplex="long-edge")
    job.set_uri("https://example.test/doc.pdf", {"username": "u", "password": "p"})
    job.set_source("billing").set_expire_after(600)

    job.check_settings()
    overflow = job.overflow_job.to_dict()

    assert overflow["printerId"] == 42
    assert overflow["content"] == "https://example.test/doc.pdf"
    assert overflow["contentType"] == "pdf_uri"
    assert overflow["source"] == "billing"
    assert overflow["expireAfter"] == 600
    assert overflow["authentication"]["credentials"] == {"user": "u", "pass": "p"}
    assert overflow["options"] == {"copies": 1, "paper": "A4", "duplex": "long-edge"}


def test_overflow_job_does_not_share_state_with_parent():
    job = _job(make_printer(max_copies=7), qty=3, copies=5, duplex="long-edge")

    job.check_settings()
    job.overflow_job.set_options({"duplex": "short-edge"})

    assert job.options.extra["duplex"] == "long-edge"
    assert job.options.copies == 7


def test_overflow_job_is_never_split_again():
    job = _job(make_printer(max_copies=4), qty=5, copies=3)

    job.check_settings()

    assert job.overflow_job.overflow_job is None
    assert job.overflow_job.printer is None


def test_unsupported_paper_raises():
    job = _job(make_printer(), paper="A7")

    with pytest.raises(UnsupportedPaperError, match="Paper"):
        job.check_settings()


def test_supported_paper_passes():
    job = _job(make_printer(), paper="A4")
    job.check_settings()


def test_unsupported_media_raises():
    job = _job(make_printer(), media="Cardboard")

    with pytest.raises(UnsupportedMediaError, match="Media"):
        job.check_settings()


def test_unsupported_dpi_raises():
    job = _job(make_printer(), dpi="1200")

    with pytest.raises(UnsupportedDpiError, match="DPI"):
        job.check_settings()


def test_dpi_matches_regardless_of_number_or_string():
    job = _job(make_printer(dpis={"600"}), dpi=600)
    job.check_settings()


def test_setting_errors_share_a_base_class():
    job = _job(make_printer(), media="Cardboard")

    with pytest.raises(InvalidPrinterSettingError):
        job.check_settings()


def test_color_is_downgraded_for_monochrome_printers():
    job = _job(make_printer(color=False), color=True)

    job.check_settings()

    assert job.options.color is False


def test_color_is_kept_for_color_printers():
    job = _job(make_printer(color=True), color=True)

    job.check_settings()

    assert job.options.color is True


def test_copies_are_handled_before_a_failing_paper_check():
    job = _job(make_printer(max_copies=7), qty=3, copies=5, paper="A7", media="Cardboard")

    with pytest.raises(UnsupportedPaperError):
        job.check_settings()

    assert job.quantity == 2
    assert job.overflow_job is not None


def test_check_settings_requires_a_printer():
    job = PrintJob(client=FakeBackendClient(), default_options={})

    with pytest.raises(PrinterNotDefinedError):
        job.check_settings()


def test_numeric_string_copies_are_split_like_numbers():
    job = _job(make_printer(max_copies=7), qty=3, copies="5")

    job.check_settings()

    assert job.quantity == 2
    assert job.options.copies == 7
    assert job.overflow_job.options.copies == 1


def test_non_numeric_copies_are_rejected():
    job = _job(make_printer(max_copies=7))

    with pytest.raises(InvalidOptionError, match="whole number"):
        job.set_options({"copies": "five"})
