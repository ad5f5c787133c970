import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from lending_model.src.calculations.interest import growth_factor
from lending_model.src.calculations.rates import annualized_rate, borrow_apy, lp_apy
from lending_model.src.config import MarketConfig, load_market_config
from lending_model.src.logging_setup import configure_logging

logger = logging.getLogger(__name__)

# utilization is clamped between these while simulating
MIN_UTILIZATION = 0.0
MAX_UTILIZATION = 0.99

@dataclass
class SimulationParams:
    initial_utilization: float = 0.5
    utilization_volatility: float = 0.01
    simulation_days: int = 365
    steps_per_day: int = 24  # hourly steps
    random_seed: Optional[int] = None

def rate_curve_table(market: MarketConfig, points: int = 101) -> pd.DataFrame:
    """Borrow APR/APY and LP APY over a utilization grid from 0 to 100%"""
    utilization = np.linspace(0, 1, points)
    params = market.interest_rate
    return pd.DataFrame({
        "utilization": utilization,
        "borrow_apr": [annualized_rate(ur, params) for ur in utilization],
        "borrow_apy": [borrow_apy(ur, params) for ur in utilization],
        "lp_apy": [lp_apy(ur, params, market.reserve_percentage) for ur in utilization],
    })

class UtilizationSimulation:
    """Random walk of pool utilization and the debt share price accruing along it"""

    def __init__(self, market: MarketConfig, params: SimulationParams):
        self.market = market
        self.params = params
        self.utilization: List[float] = []
        self.share_prices: List[float] = []
        self.times: List[float] = []
        self.rng = np.random.default_rng(params.random_seed)

    def simulate(self) -> Tuple[List[float], List[float], List[float]]:
        step_seconds = 86400 / self.params.steps_per_day
        total_steps = self.params.simulation_days * self.params.steps_per_day
        current_ur = self.params.initial_utilization
        share_price = 1.0

        for step in range(total_steps):
            current_ur += self.rng.normal(0, self.params.utilization_volatility)
            current_ur = float(np.clip(current_ur, MIN_UTILIZATION, MAX_UTILIZATION))

            # one unit of total assets, so open interest equals utilization
            share_price *= growth_factor(current_ur, 1.0, self.market.interest_rate, step_seconds)

            self.times.append(step / self.params.steps_per_day)
            self.utilization.append(current_ur)
            self.share_prices.append(share_price)

        logger.info("simulated %d steps, final debt share price %.6f", total_steps, share_price)
        return self.times, self.utilization, self.share_prices

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({
            "day": self.times,
            "utilization": self.utilization,
            "debt_share_price": self.share_prices,
        })

    def plot_results(self, output_dir: Path):
        fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(12, 8))

        ax1.plot(self.times, np.array(self.utilization) * 100, label='Utilization')
        ax1.axhline(y=self.market.interest_rate.ur_kink * 100, color='r', linestyle='--', alpha=0.3)
        ax1.set_ylabel('Utilization (%)')
        ax1.set_title('Pool Utilization Over Time')
        ax1.legend()
        ax1.grid(True)

        ax2.plot(self.times, self.share_prices, label='Debt Share Price', color='orange')
        ax2.set_ylabel('Assets per Debt Share')
        ax2.set_xlabel('Time (days)')
        ax2.set_title('Debt Share Price Over Time')
        ax2.legend()
        ax2.grid(True)

        plt.tight_layout()

        plot_name = f"volatility_{self.params.utilization_volatility}"
        if self.params.random_seed is not None:
            plot_name += f"_seed_{self.params.random_seed}"

        plt.savefig(output_dir / f"{plot_name}.png")
        plt.close()

def plot_rate_curve(table: pd.DataFrame, market: MarketConfig, output_dir: Path):
    fig, ax = plt.subplots(figsize=(12, 6))

    ax.plot(table["utilization"] * 100, table["borrow_apr"] * 100, label='Borrow APR')
    ax.plot(table["utilization"] * 100, table["borrow_apy"] * 100, label='Borrow APY')
    ax.plot(table["utilization"] * 100, table["lp_apy"] * 100, label='LP APY')
    ax.axvline(x=market.interest_rate.ur_kink * 100, color='r', linestyle='--', alpha=0.3)
    ax.set_xlabel('Utilization (%)')
    ax.set_ylabel('Rate (%)')
    ax.set_title(f'Interest Rate Curve ({market.name})')
    ax.legend(loc='upper left')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    plt.savefig(output_dir / f"rate_curve_{timestamp}.png", bbox_inches='tight', dpi=300)
    plt.close()

def main():
    configure_logging()
    market = load_market_config()

    output_dir = Path('research/results') / market.name
    output_dir.mkdir(parents=True, exist_ok=True)

    table = rate_curve_table(market)
    table.to_csv(output_dir / "rate_curve.csv", index=False)
    logger.info("rate curve at kink:\n%s",
                table[table["utilization"].round(2) == market.interest_rate.ur_kink])
    plot_rate_curve(table, market, output_dir)

    sim = UtilizationSimulation(market, SimulationParams(random_seed=57, simulation_days=100))
    sim.simulate()
    sim.to_frame().to_csv(output_dir / "utilization_path.csv", index=False)
    sim.plot_results(output_dir)

if __name__ == "__main__":
    main()
