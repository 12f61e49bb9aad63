import os

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from jit_times.timestamps import to_milliseconds

sns.set_theme(style="whitegrid", palette="muted")


def plot_method_times(df: pd.DataFrame, outfile, top_n: int = 20):
    """
    Compares the total vs. self JIT time of the first methods of a report.

    This answers the question: "Is a method slow to JIT on its own, or
    because of the methods compiled while it was being compiled?"
    """
    if df.empty:
        raise ValueError("There are no methods to plot")

    subset = df.head(top_n)
    subset = pd.DataFrame(
        {
            "Method": subset["method"],
            "Total Time": [to_milliseconds(x) for x in subset["total_time"]],
            "Self Time": [to_milliseconds(x) for x in subset["self_time"]],
        }
    )

    # Melt the dataframe to make it "long", which is ideal for seaborn's hue
    melted_df = subset.melt(
        id_vars="Method",
        value_vars=["Total Time", "Self Time"],
        var_name="Time Type",
        value_name="Time (ms)",
    )

    outdir = os.path.dirname(os.path.abspath(outfile))
    os.makedirs(outdir, exist_ok=True)

    height = max(4, 0.4 * max(len(subset), 1) + 2)
    fig, ax = plt.subplots(figsize=(12, height))
    sns.barplot(data=melted_df, y="Method", x="Time (ms)", hue="Time Type", palette="muted", ax=ax)
    ax.set_title(f"JIT Time of Top {len(subset)} Methods")
    ax.set_xlabel("Time (ms)")
    ax.set_ylabel("Method")
    plt.tight_layout()
    plt.savefig(outfile)
    plt.close(fig)
    return melted_df
