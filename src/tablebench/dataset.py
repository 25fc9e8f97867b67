"""The dataset every benchmark runs against.

The data is a subset of the well known ``mtcars`` reference dataset
(Motor Trend road tests of 32 cars from 1973-74): the miles per gallon,
the number of cylinders, the gross horsepower and the transmission type
of each car, plus the name of the car itself.

The same values are provided in three representations,
one for each of the idioms being compared:

* ``python`` a plain ``dict`` of column lists.
* ``pyarrow`` a :class:`pyarrow.Table`, every transformation returns a new table.
* ``pandas`` a :class:`pandas.DataFrame`, which can be modified in place.

>>> dataset = build_dataset()
>>> dataset.num_rows
32
>>> list(dataset.columns)
['mpg', 'cyl', 'hp', 'am', 'car']
>>> dataset.table.column_names == list(dataset.frame.columns)
True
"""

import pandas as pd
import pyarrow as pa

__all__ = ("Dataset", "build_dataset", "MTCARS")

#: (car, mpg, cyl, hp, am) in the reference row order.
MTCARS = (
    ("Mazda RX4", 21.0, 6, 110, 1),
    ("Mazda RX4 Wag", 21.0, 6, 110, 1),
    ("Datsun 710", 22.8, 4, 93, 1),
    ("Hornet 4 Drive", 21.4, 6, 110, 0),
    ("Hornet Sportabout", 18.7, 8, 175, 0),
    ("Valiant", 18.1, 6, 105, 0),
    ("Duster 360", 14.3, 8, 245, 0),
    ("Merc 240D", 24.4, 4, 62, 0),
    ("Merc 230", 22.8, 4, 95, 0),
    ("Merc 280", 19.2, 6, 123, 0),
    ("Merc 280C", 17.8, 6, 123, 0),
    ("Merc 450SE", 16.4, 8, 180, 0),
    ("Merc 450SL", 17.3, 8, 180, 0),
    ("Merc 450SLC", 15.2, 8, 180, 0),
    ("Cadillac Fleetwood", 10.4, 8, 205, 0),
    ("Lincoln Continental", 10.4, 8, 215, 0),
    ("Chrysler Imperial", 14.7, 8, 230, 0),
    ("Fiat 128", 32.4, 4, 66, 1),
    ("Honda Civic", 30.4, 4, 52, 1),
    ("Toyota Corolla", 33.9, 4, 65, 1),
    ("Toyota Corona", 21.5, 4, 97, 0),
    ("Dodge Challenger", 15.5, 8, 150, 0),
    ("AMC Javelin", 15.2, 8, 150, 0),
    ("Camaro Z28", 13.3, 8, 245, 0),
    ("Pontiac Firebird", 19.2, 8, 175, 0),
    ("Fiat X1-9", 27.3, 4, 66, 1),
    ("Porsche 914-2", 26.0, 4, 91, 1),
    ("Lotus Europa", 30.4, 4, 113, 1),
    ("Ford Pantera L", 15.8, 8, 264, 1),
    ("Ferrari Dino", 19.7, 6, 175, 1),
    ("Maserati Bora", 15.0, 8, 335, 1),
    ("Volvo 142E", 21.4, 4, 109, 1),
)


class Dataset:
    """The benchmark data held in all three representations at once.

    The representations are built from the same values and are
    expected to stay identical. Only the pandas frame can be
    changed in place, benchmarks that do so must restore it.
    """

    def __init__(
        self, columns: dict[str, list], table: pa.Table, frame: pd.DataFrame
    ) -> None:
        """
        :param columns: The data as a dict of plain python lists.
        :param table: The data as an immutable :class:`pyarrow.Table`.
        :param frame: The data as a mutable :class:`pandas.DataFrame`.
        """
        self.columns = columns
        self.table = table
        self.frame = frame

    def __str__(self) -> str:
        return f"Dataset(columns={list(self.columns)}, rows={self.num_rows})"

    @property
    def num_rows(self) -> int:
        return self.table.num_rows

    def snapshot(self) -> pd.DataFrame:
        """Independent copy of the mutable representation.

        Useful to verify that a benchmark left the pandas
        frame as it found it.
        """
        return self.frame.copy(deep=True)


def build_dataset() -> Dataset:
    """Build a fresh :class:`Dataset` out of the embedded ``mtcars`` values.

    Every call returns new objects, so each run starts
    from untouched data.
    """
    car, mpg, cyl, hp, am = (list(values) for values in zip(*MTCARS))
    columns = {"mpg": mpg, "cyl": cyl, "hp": hp, "am": am, "car": car}

    table = pa.table(
        {
            "mpg": pa.array(mpg, type=pa.float64()),
            "cyl": pa.array(cyl, type=pa.int64()),
            "hp": pa.array(hp, type=pa.int64()),
            "am": pa.array(am, type=pa.int64()),
            "car": pa.array(car, type=pa.string()),
        }
    )
    # Built from its own lists so that no buffer is shared with the arrow table.
    frame = pd.DataFrame({name: list(values) for name, values in columns.items()})

    return Dataset(columns, table, frame)
