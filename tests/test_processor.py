import os

import pytest

from seedstats.errors import MalformedRecordError, NoMatchingFilesError, SampleReadError
from seedstats.processor import aggregate, calculate_means, collect_samples, list_sample_files, summarize_samples


def write_samples(directory, samples):
    for name, content in samples.items():
        (directory / name).write_text(content)


def test_empty_directory_has_no_data(tmp_path):
    with pytest.raises(NoMatchingFilesError) as excinfo:
        aggregate(str(tmp_path))
    assert excinfo.value.directory == str(tmp_path)


def test_no_matching_files_has_no_data(tmp_path):
    write_samples(tmp_path, {"other.txt": "1, 2", "result.csv": "3, 4"})
    with pytest.raises(NoMatchingFilesError):
        aggregate(str(tmp_path))


def test_single_file(tmp_path):
    write_samples(tmp_path, {"s1.txt": "10.0, 5"})
    assert aggregate(str(tmp_path)) == (10.0, 5.0)


def test_multiple_files_are_averaged(tmp_path):
    write_samples(tmp_path, {"s1.txt": "10, 2", "s2.txt": "20, 4", "s3.txt": "30, 6"})
    mean_time, mean_cars = aggregate(str(tmp_path))
    assert mean_time == pytest.approx(20.0)
    assert mean_cars == pytest.approx(4.0)


def test_only_prefixed_files_count(tmp_path):
    write_samples(tmp_path, {"s1.txt": "10, 2", "s2.txt": "20, 4", "other.txt": "999, 999"})
    assert aggregate(str(tmp_path)) == (15.0, 3.0)


def test_prefix_needs_no_extension(tmp_path):
    write_samples(tmp_path, {"seed": "4, 8"})
    assert aggregate(str(tmp_path)) == (4.0, 8.0)


def test_custom_prefix(tmp_path):
    write_samples(tmp_path, {"s1.txt": "10, 2", "run_1.txt": "2, 6"})
    assert aggregate(str(tmp_path), prefix="run_") == (2.0, 6.0)


@pytest.mark.parametrize("order", [(0, 1, 2), (2, 0, 1), (1, 2, 0)])
def test_means_do_not_depend_on_file_order(tmp_path, order):
    records = ["0.1, 7", "0.2, 11", "0.3, 13"]
    write_samples(tmp_path, {f"s{i}.txt": records[j] for i, j in enumerate(order)})
    mean_time, mean_cars = aggregate(str(tmp_path))
    assert mean_time == pytest.approx(0.2)
    assert mean_cars == pytest.approx(31.0 / 3)


def test_malformed_file_stops_aggregation(tmp_path):
    write_samples(tmp_path, {"s1.txt": "10, 2", "s2.txt": "10,5"})
    with pytest.raises(MalformedRecordError) as excinfo:
        aggregate(str(tmp_path))
    assert excinfo.value.filepath == os.path.join(str(tmp_path), "s2.txt")


def test_malformed_file_permissive(tmp_path):
    write_samples(tmp_path, {"s1.txt": "10, 2", "s2.txt": "10,5"})
    assert aggregate(str(tmp_path), permissive=True) == (10.0, 1.0)


def test_matching_directory_is_a_read_error(tmp_path):
    write_samples(tmp_path, {"s1.txt": "10, 2"})
    (tmp_path / "subruns").mkdir()
    with pytest.raises(SampleReadError):
        aggregate(str(tmp_path))


def test_list_sample_files(tmp_path):
    write_samples(tmp_path, {"s2.txt": "1, 1", "s1.txt": "1, 1", "data.txt": "1, 1"})
    assert list_sample_files(str(tmp_path)) == [
        os.path.join(str(tmp_path), "s1.txt"),
        os.path.join(str(tmp_path), "s2.txt"),
    ]


def test_collect_samples_columns(tmp_path):
    write_samples(tmp_path, {"s1.txt": "10, 2", "s2.txt": "20, 4"})
    df = collect_samples(str(tmp_path))
    assert list(df.columns) == ['file', 'time', 'cars']
    assert sorted(df['file']) == ["s1.txt", "s2.txt"]
    assert len(df) == 2


def test_calculate_means_of_empty_frame(tmp_path):
    write_samples(tmp_path, {"s1.txt": "10, 2"})
    df = collect_samples(str(tmp_path))
    with pytest.raises(NoMatchingFilesError):
        calculate_means(df.iloc[0:0])


def test_summarize_samples(tmp_path):
    write_samples(tmp_path, {"s1.txt": "10, 2", "s2.txt": "20, 4", "s3.txt": "30, 6"})
    summary = summarize_samples(collect_samples(str(tmp_path)))
    assert list(summary.index) == ['time', 'cars']
    assert list(summary.columns) == ['count', 'mean', 'std', 'min', 'max']
    assert summary.loc['time', 'count'] == 3
    assert summary.loc['time', 'mean'] == pytest.approx(20.0)
    assert summary.loc['time', 'std'] == pytest.approx((200.0 / 3) ** 0.5)
    assert summary.loc['cars', 'min'] == 2.0
    assert summary.loc['cars', 'max'] == 6.0


def test_summarize_single_sample_has_zero_std(tmp_path):
    write_samples(tmp_path, {"s1.txt": "10, 2"})
    summary = summarize_samples(collect_samples(str(tmp_path)))
    assert summary.loc['cars', 'std'] == 0.0
