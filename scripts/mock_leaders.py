import numpy as np
import pandas as pd
from pathlib import Path

n_leaders = 400
rng = np.random.default_rng(0)

groups = ["oecd", "eu27", "brics", "gulf", "sa"]
countries = [f"Country {i}" for i in range(40)]

start_year = rng.integers(1950, 2020, size=n_leaders)
duration = rng.integers(0, 15, size=n_leaders)
end_year = np.minimum(start_year + duration, 2021)
start_age = rng.integers(30, 80, size=n_leaders)
pcgdp = rng.lognormal(mean=9.5, sigma=1.0, size=n_leaders).round(2)

df = pd.DataFrame(
    {
        "country": rng.choice(countries, size=n_leaders),
        "leader": [f"Leader {i}" for i in range(n_leaders)],
        "gender": rng.choice(["Male", "Female"], size=n_leaders, p=[0.85, 0.15]),
        "start_year": start_year,
        "end_year": end_year,
        "start_age": start_age,
        "end_age": start_age + (end_year - start_year),
        "duration": end_year - start_year,
        "pcgdp": pcgdp.astype(object),
        "label": (rng.random(n_leaders) < 0.05).astype(int),
    }
)

# ~20% of leaders without GDP data
df.loc[rng.random(n_leaders) < 0.2, "pcgdp"] = "NA"

for g in groups:
    df[g] = (rng.random(n_leaders) < 0.3).astype(int)

Path("data").mkdir(exist_ok=True)
df.to_csv("data/mock_leaderlist.csv", index=False)
print("wrote data/mock_leaderlist.csv", df.shape)
