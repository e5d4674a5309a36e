#!/usr/bin/env python3
import os
import sys
import argparse

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
from seedstats.errors import ExportError, SampleError
from seedstats.processor import MARKER_PREFIX, collect_samples, calculate_means, summarize_samples, has_non_finite_means
from seedstats.visualizer import plot_samples


def print_summary(df, summary):
    for row in df.itertuples(index=False):
        print(f"  {row.file}: time={row.time} cars={row.cars}", file=sys.stderr)
    print(f"Summary over {len(df)} sample files:", file=sys.stderr)
    print(summary.to_string(float_format=lambda v: f"{v:.3f}"), file=sys.stderr)


def check_output_path(path):
    output_dir = os.path.dirname(os.path.abspath(path))
    if not os.path.isdir(output_dir):
        raise ExportError(path, f"directory {output_dir} does not exist")
    if os.path.isdir(path):
        raise ExportError(path, "is a directory")


def export_samples(df, csv_path=None, plot_path=None):
    """Write the CSV and the plot, a failed plot removes everything already written"""
    if csv_path:
        try:
            df.to_csv(csv_path, index=False)
        except OSError as e:
            raise ExportError(csv_path, e.strerror or str(e)) from e
        print(f"Data saved to: {csv_path}", file=sys.stderr)

    if plot_path:
        try:
            plot_samples(df, plot_path)
        except OSError as e:
            for path in (csv_path, plot_path):
                if path and os.path.isfile(path):
                    os.remove(path)
            raise ExportError(plot_path, e.strerror or str(e)) from e


def run(directory, prefix=MARKER_PREFIX, permissive=False, verbose=False, csv_path=None, plot_path=None):
    """Aggregate one directory and print the report, raises SampleError before printing anything"""
    for path in (csv_path, plot_path):
        if path:
            check_output_path(path)

    if verbose:
        print(f"Processing sample files from: {directory}", file=sys.stderr)

    df = collect_samples(directory, prefix, permissive=permissive)
    mean_time, mean_cars = calculate_means(df)

    if verbose:
        print_summary(df, summarize_samples(df))
        if has_non_finite_means((mean_time, mean_cars)):
            print("Warning: a mean is not finite, check the sample files for overflowing values", file=sys.stderr)

    export_samples(df, csv_path, plot_path)

    print(f"Average Time: {mean_time}")
    print(f"Average Cars: {mean_cars}")
    return mean_time, mean_cars


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Average the time and car count over all seed result files in a directory",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--dir', default='.', help='Directory holding the sample files')
    parser.add_argument('--prefix', default=MARKER_PREFIX,
                        help='Only files whose name starts with this prefix are read')
    parser.add_argument('--permissive', action='store_true',
                        help='Parse leading numbers and treat anything unparsable as 0.0 instead of failing')
    parser.add_argument('--verbose', action='store_true',
                        help='Print every sample and a summary table to stderr')
    parser.add_argument('--csv', default=None, help='Write the per-file samples to this CSV file')
    parser.add_argument('--plot', default=None, help='Write a scatter plot of the samples to this PDF file')

    args = parser.parse_args(argv)
    directory = os.path.abspath(args.dir)

    if not os.path.isdir(directory):
        print(f"Error: Directory {directory} does not exist", file=sys.stderr)
        return 1

    try:
        run(directory, args.prefix, permissive=args.permissive, verbose=args.verbose,
            csv_path=args.csv, plot_path=args.plot)
    except SampleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
