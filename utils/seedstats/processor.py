import os
import numpy as np
import pandas as pd

from .errors import NoMatchingFilesError
from .parser import parse_sample_file

MARKER_PREFIX = 's'
FIELDS = ['time', 'cars']


def list_sample_files(directory, prefix=MARKER_PREFIX):
    """Return the paths of the entries in directory whose name starts with prefix"""
    files = os.listdir(directory)
    return [os.path.join(directory, filename)
            for filename in sorted(files)
            if filename.startswith(prefix)]


def collect_samples(directory, prefix=MARKER_PREFIX, permissive=False):
    """Read every sample file in directory into a DataFrame (file, time, cars).

    Stops at the first unreadable or malformed file; nothing is returned for a
    partially read directory.
    """
    samples = []
    for filepath in list_sample_files(directory, prefix):
        record = parse_sample_file(filepath, permissive=permissive)
        record['file'] = os.path.basename(filepath)
        samples.append(record)

    if not samples:
        raise NoMatchingFilesError(directory, prefix)

    return pd.DataFrame(samples, columns=['file'] + FIELDS)


def calculate_means(df):
    if df.empty:
        raise NoMatchingFilesError('<samples>', MARKER_PREFIX)

    file_count = len(df)
    total_time = df['time'].sum()
    total_cars = df['cars'].sum()
    return float(total_time / file_count), float(total_cars / file_count)


def summarize_samples(df):
    if df.empty:
        raise NoMatchingFilesError('<samples>', MARKER_PREFIX)

    summary = df[FIELDS].agg(['count', 'mean', 'min', 'max']).T
    # population std, a single seed gives 0 instead of NaN
    summary['std'] = [np.std(df[field].values) for field in FIELDS]
    summary['count'] = summary['count'].astype(int)
    summary.index.name = 'field'
    return summary[['count', 'mean', 'std', 'min', 'max']]


def has_non_finite_means(means):
    return not np.all(np.isfinite(means))


def aggregate(directory, prefix=MARKER_PREFIX, permissive=False):
    """Mean time and mean car count over all sample files in directory"""
    df = collect_samples(directory, prefix, permissive=permissive)
    return calculate_means(df)
