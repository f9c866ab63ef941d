# ticketbooker

A terminal application for running small events. Event managers create events
with a generated seating plan. Customers pick a seat from a colour-coded map
and receive a ticket number. They later use that number to check in at the
door or to ask for a refund.

## Installation

```
pip install .
```

## Running

```
ticketbooker
```

Options:

- `--data-dir DIR` – the folder that holds one sub-folder per event. The
  default is `event_data`, relative to the current directory.
- `--no-intro` – skip the start-up spinner animation, which otherwise runs
  for about ten seconds.

Then the main menu appears:

1. **Book a ticket** – choose an event and pick a row and a column on the
   seat map. Confirm the seat, the price and the name on the ticket. You then
   receive a ticket number such as `Summer-Gala-3-2-a9Zq`: the event name with
   spaces turned into hyphens, then the row, the column and four random
   letters or digits.
2. **Check In Desk** – enter a ticket number to mark its seat as checked in.
   Each ticket can be checked in only once.
3. **Refund Ticket** – enter a ticket number to release its seat. A ticket that
   has already been checked in cannot be refunded.
4. **Create an event** – name the event and give three sizes: the row count,
   the row length and the number of seats between walkways. Each must be a
   whole number from 1 to 15. The row count must also be at least 3 so that
   the venue can be split into sections. If an event of that name exists
   already, you are asked whether to replace it.
5. **Rename an event** – give an event a new name. If another event already
   has that name, you are asked to confirm, and the other event is removed.
6. **Delete an Event** – remove an event and all its data. You are asked to
   confirm twice.
7. **Exit**

Yes/no questions accept `y`, `yes`, `n` or `no` in any letter case.

## Data layout

Each event is stored in its own folder inside the data directory. The folder
holds comma-separated text files, all with the same grid shape:

| File                | Contents                                                      |
|---------------------|---------------------------------------------------------------|
| `map_data.txt`      | venue layout: `seat`, `walk`, `door` and row/column numbers   |
| `sold_data.txt`     | `a` for available, `s` for sold, `na` where there is no seat  |
| `price_data.txt`    | seat prices, `-1` where there is no seat                      |
| `names_data.txt`    | names on booked tickets                                       |
| `ticket_data.txt`   | issued ticket numbers                                         |
| `check_in_data.txt` | `no` / `yes` check-in state of each seat                      |

Rows are split into sections by horizontal walkways. Prices start at 573.99 in
the front section and drop by 124 for each section further back.

## Using it as a library

You can use the building blocks without the interactive menus:

```python
from ticketbooker.generator import generate_data, VenueSize
from ticketbooker.creator import create_event_folder
from ticketbooker.datafile import load_matrix, find_ticket
from ticketbooker.checkin import check_in_ticket
from ticketbooker.refund import refund_ticket, RefundResult

rows = generate_data("sold_data.txt", 4, 6, 2)   # a list of rows of strings

create_event_folder("Summer Gala", VenueSize(4, 6, 2), "event_data/Summer Gala")
```

Useful functions:

- `ticketbooker.datafile` – `load_matrix`, `save_matrix`, `update_and_save`,
  `find_ticket` and `was_ticket_issued`. Reading or writing problems raise
  `DataFileError`.
- `ticketbooker.checkin.check_in_ticket(ticket_number, parent_directory)` – this
  returns a `CheckInResult` with the holder's name, row, column and an
  `already_checked_in` flag. It returns `None` when the ticket was never issued.
- `ticketbooker.refund.refund_ticket(ticket_number, parent_directory)` – this
  returns `RefundResult.REFUNDED`, `ALREADY_USED` or `NOT_FOUND`.
- `ticketbooker.eventdata.load_event_data(directory)` – this loads every data
  matrix of one event into an `EventData`.
- `ticketbooker.seatmap.render_venue_layout(event, row, seat)` – this returns
  the coloured seat map as a string.

## Limitations

- All data is kept in plain text files. The application has no database, no
  network service and no locking, so do not run two copies on the same data
  directory at once.
- Each change rewrites the whole data file concerned.
- A ticket number is matched to its event by the name part of the number.
  Hyphens in that part are read as spaces. Check-in and refund therefore do
  not find events whose names contain hyphens.

## Running the tests

```
pip install ".[test]"
pytest
```