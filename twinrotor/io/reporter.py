"""
State Reporters

Receive one StateRecord per simulation step (including the initial state)
and print, collect or export it. Reporters only ever see immutable records,
so a failing reporter cannot alter the simulation state.
"""

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, NamedTuple, Optional, TextIO, Union

import numpy as np
import pandas as pd

from ..core.state import SimulationState


def rad_per_s_to_rpm(omega: float) -> float:
    """Convert angular velocity from rad/s to revolutions per minute."""
    return omega * 60.0 / (2.0 * np.pi)


class StateRecord(NamedTuple):
    """One emitted row: time, motor currents and speeds, drone rate and attitude."""

    time: float           # s
    right_current: float  # A
    left_current: float   # A
    right_rpm: float      # RPM
    left_rpm: float       # RPM
    rate: float           # rad/s
    attitude: float       # rad

    @classmethod
    def from_state(cls, time: float, state: SimulationState) -> 'StateRecord':
        """Build a record from a simulation state, converting speeds to RPM."""
        return cls(
            float(time),
            float(state.right.current),
            float(state.left.current),
            float(rad_per_s_to_rpm(state.right.angular_velocity)),
            float(rad_per_s_to_rpm(state.left.angular_velocity)),
            float(state.drone.rate),
            float(state.drone.attitude),
        )


COLUMNS = list(StateRecord._fields)


class Reporter(ABC):
    """
    Base class for state consumers.

    The simulation calls report() once per emitted record and close() when
    the run is finished.
    """

    @abstractmethod
    def report(self, record: StateRecord):
        """Consume one state record."""
        pass

    def close(self):
        """Flush or release resources after the run."""
        pass


class PrintReporter(Reporter):
    """
    Print each record as seven fixed-width columns.

    Parameters
    ----------
    stream : file-like, optional
        Output stream (default: sys.stdout)
    header : bool, optional
        Print a column header before the first record
    """

    ROW_FORMAT = ' '.join(['{:11.8f}'] * len(COLUMNS))

    def __init__(self, stream: Optional[TextIO] = None, header: bool = False):
        self.stream = stream
        self.header = header
        self._header_written = False

    def format_record(self, record: StateRecord) -> str:
        """One output line for a record, without newline."""
        return self.ROW_FORMAT.format(*record)

    def report(self, record: StateRecord):
        stream = self.stream if self.stream is not None else sys.stdout
        if self.header and not self._header_written:
            print('# ' + ' '.join(COLUMNS), file=stream)
            self._header_written = True
        print(self.format_record(record), file=stream)


class TrajectoryHistory(Reporter):
    """
    Collects every record of a run for analysis and plotting.

    Examples
    --------
    >>> history = simulate(SimulationConfig.nominal())
    >>> df = history.to_dataframe()
    >>> history.save_csv('trajectory.csv')
    """

    def __init__(self, records: Optional[List[StateRecord]] = None):
        self.records: List[StateRecord] = list(records) if records else []

    def report(self, record: StateRecord):
        self.records.append(record)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index) -> StateRecord:
        return self.records[index]

    def __iter__(self):
        return iter(self.records)

    @property
    def final(self) -> StateRecord:
        """Last recorded state."""
        if not self.records:
            raise IndexError("Trajectory is empty")
        return self.records[-1]

    @property
    def times(self) -> np.ndarray:
        return np.array([r.time for r in self.records])

    def column(self, name: str) -> np.ndarray:
        """One column of the trajectory by field name."""
        if name not in COLUMNS:
            raise KeyError(f"Unknown column '{name}', expected one of {COLUMNS}")
        index = COLUMNS.index(name)
        return np.array([r[index] for r in self.records])

    def to_array(self) -> np.ndarray:
        """
        Trajectory as a numpy array.

        Returns
        -------
        np.ndarray, shape (N, 7)
            Rows ordered as StateRecord fields
        """
        if not self.records:
            return np.zeros((0, len(COLUMNS)))
        return np.array(self.records, dtype=float)

    def to_dataframe(self) -> pd.DataFrame:
        """Trajectory as a DataFrame with one column per StateRecord field."""
        return pd.DataFrame(self.to_array(), columns=COLUMNS)

    def save_csv(self, filepath: Union[str, Path]):
        """Write the trajectory to a CSV file."""
        self.to_dataframe().to_csv(filepath, index=False)
        print(f"Trajectory saved to: {filepath} ({len(self)} records)")

    @classmethod
    def load_csv(cls, filepath: Union[str, Path]) -> 'TrajectoryHistory':
        """Read a trajectory written by save_csv."""
        df = pd.read_csv(filepath)
        missing = [c for c in COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(f"CSV file {filepath} is missing columns: {missing}")
        rows = df[COLUMNS].to_numpy(dtype=float)
        return cls([StateRecord(*map(float, row)) for row in rows])

    def __repr__(self) -> str:
        return f"TrajectoryHistory({len(self)} records)"
