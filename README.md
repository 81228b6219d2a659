# cyanla

Visitor-side services for a company HR help desk. It models the state and rules behind each service and contains no user-interface code. It has no dependencies outside the standard library.

## Modules

- `cyanla.appointment` handles interview booking.
  - `AppointmentBooking(today, rng)` takes you through choosing a department, then a leader (`leaders_for` lists them), then a date from today up to 30 days ahead, then a free time slot.
  - `summary()` describes what has been chosen so far. `confirm()` returns the confirmation text once every step is complete.
  - `generate_time_slots(rng)` builds the sixteen half-hour `TimeSlot`s and marks about one in four as already booked, at random.
  - An invalid choice raises `ValueError`.
- `cyanla.faq` holds the frequently asked questions.
  - `FAQBook` filters `FAQItem`s by category and by a case-insensitive keyword.
  - `search_text_changed` filters only when the text has at least two characters or has been cleared.
  - `answer_html(index)` renders the answer to a question in the filtered list.
  - `default_faqs()` returns the built-in set.
- `cyanla.mapview` is the floor map. `CompanyMap` holds `Department`s placed on `Rect`s.
  - It clamps the zoom to the range 0.5–3.0.
  - `department_at` finds the department at a widget position, scaled by the zoom.
  - It keeps track of highlighting.
  - `show_route` plans L-shaped routes between the centres of two departments.
  - `tooltip` gives the text shown for a department.
- `cyanla.navigation` is the navigation panel.
  - `Navigator` filters departments by floor and keyword, and `list_info` reports how many departments match.
  - It selects a department and fills the information panel using `format_department_info`.
  - It zooms in and out by steps of 1.2 and can reset the view.
  - `route_message` writes the route message and plans the route on the map. `emergency_route` does the same for the emergency department.
  - `default_departments()` returns the built-in site plan.
- `cyanla.chatrules` holds the rules of the HR assistant.
  - `wants_human` detects a direct request for a human agent.
  - `generate_response` gives the built-in fallback reply.
  - `analyze_qualities` returns a `TriageAdvice`, and `advice_actions` gives the action buttons that advice calls for.
  - `action_buttons_for` gives the action buttons after a reply.
  - It also provides `format_timestamp`, `new_session_id`, and the `MessageType` and `ChatMessage` types.
- `cyanla.chat` keeps an assistant conversation. `ChatSession` records messages.
  - `send` returns the recent dialogue to pass to an AI service, or hands over to a human agent when asked to.
  - It accepts replies with `receive_reply` and failures with `receive_error`.
  - It handles action buttons, hand-overs (`HumanServiceRequest`) and clearing.
  - `ChatHistoryStore` saves messages to SQLite and loads them back by session. `ChatSession` saves the history to it after every tenth message.
- `cyanla.realchat` holds presentation rules for live chat with staff:
  - relative timestamps (`format_relative_time`);
  - the connection status line (`connection_status`, `SessionStatus`);
  - bubble styles (`bubble_style`, `BubbleStyle`);
  - sender names;
  - the Enter-to-send key rule;
  - detecting the "staff joined" notice.

## Example

```python
import datetime
import random

from cyanla.appointment import AppointmentBooking
from cyanla.faq import FAQBook, default_faqs

booking = AppointmentBooking(datetime.date.today(), random.Random(1))
booking.select_department("控制部")
print(booking.summary())

book = FAQBook(default_faqs())
book.filter("停车")
print(book.answer_html(0))
```

## What it does not do

- There are no windows, screens or command-line program.
- There is no client for an AI service. `ChatSession` prepares the context to send and accepts the reply, but you must make the request yourself.
- Live chat with staff has no message storage and no transport. `cyanla.realchat` only decides how sessions and messages are shown.
- Bookings are not stored anywhere.

## Tests

The tests use pytest, which is listed in the `test` extra.