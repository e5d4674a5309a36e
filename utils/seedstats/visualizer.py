import os
import sys
import matplotlib.pyplot as plt
import seaborn as sns

fontSizeSamples = 18


def plot_samples(df, output_path='samples.pdf'):
    """Scatter time against cars for every sample file and mark both means, save to PDF and PNG"""
    if df.empty:
        print("No data to plot", file=sys.stderr)
        return None

    mean_time = df['time'].mean()
    mean_cars = df['cars'].mean()

    fig, ax = plt.subplots(1, 1)
    sns.scatterplot(data=df, x='cars', y='time', ax=ax, s=80, color=sns.color_palette('Blues', 6)[4],
                    edgecolor='black', linewidth=0.5)

    ax.axvline(x=mean_cars, color='red', linewidth=2, linestyle='--')
    ax.axhline(y=mean_time, color='red', linewidth=2, linestyle='--')
    ax.text(x=mean_cars, y=ax.get_ylim()[1], s=f' Avg. cars = {mean_cars:.2f}',
            horizontalalignment='left', verticalalignment='top', fontsize=fontSizeSamples - 4)
    ax.text(x=ax.get_xlim()[1], y=mean_time, s=f'Avg. time = {mean_time:.2f} ',
            horizontalalignment='right', verticalalignment='bottom', fontsize=fontSizeSamples - 4)

    ax.set_xlabel('Cars', fontsize=fontSizeSamples + 2)
    ax.set_ylabel('Average time', fontsize=fontSizeSamples + 2)
    ax.set_title(f'{len(df)} sample files', fontsize=fontSizeSamples)
    ax.tick_params(axis='both', labelsize=fontSizeSamples - 2)

    fig.set_size_inches([12, 8])
    fig.tight_layout()
    try:
        png_path = os.path.splitext(output_path)[0] + '.png'
        if output_path.lower().endswith('.png'):
            png_path = output_path
        else:
            fig.savefig(output_path, format='pdf', bbox_inches='tight', dpi=300)
            print(f"Plot saved to: {output_path}", file=sys.stderr)
        fig.savefig(png_path, format='png', bbox_inches='tight', dpi=300)
    finally:
        plt.close(fig)

    print(f"Plot saved to: {png_path}", file=sys.stderr)
    return png_path
