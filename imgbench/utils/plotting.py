import os
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

def plot_latency(paths, latencies_s, out_path, title="Inference latency"):
    lat_ms = np.asarray(latencies_s, dtype=np.float64) * 1000.0
    labels = [os.path.basename(p) for p in paths]
    plt.figure()
    plt.plot(range(len(lat_ms)), lat_ms, marker="o")
    if len(lat_ms):
        plt.axhline(float(lat_ms.mean()), linestyle="--", label=f"mean {lat_ms.mean():.2f} ms")
        plt.legend()
    if len(labels) <= 30:
        plt.xticks(range(len(labels)), labels, rotation=45, ha="right")
    plt.xlabel("Image")
    plt.ylabel("Latency (ms)")
    plt.title(title)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()
