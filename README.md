# pidgypost

A small terminal chat client screen. The terminal is split into two panels: a
list of contacts on the left, and on the right a chat pane holding a scrolling
message view above a text box where you type.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
pidgypost
```

The program takes over the whole terminal until you quit. If it fails, it
prints `Alas, there's been an error: ...` and exits with status 1.

The list starts with four sample contacts, `Name0` to `Name3`.

## Keys

With no contact chosen, keys act on the contact list:

| Key              | Action                                   |
|------------------|------------------------------------------|
| up / k           | move the cursor up                       |
| down / j         | move the cursor down                     |
| enter            | choose the highlighted contact           |
| x, backspace     | delete the highlighted contact           |
| a                | add a contact "New Item!" at the top     |
| s                | toggle the spinner next to the title     |
| T                | toggle the title bar                     |
| S                | toggle the status bar                    |
| P                | toggle the page indicator                |
| H                | toggle the help line                     |
| q, ctrl+c        | quit                                     |

Once a contact is chosen, keys go to the chat pane. Every key is passed both
to the message view and to the text box:

- printable characters are typed into the text box (up to 280 characters),
  and backspace removes the last one;
- up/k, down/j, pgup/b, pgdown/space/f, u/ctrl+u and d/ctrl+d scroll the
  message view;
- esc clears the selection and returns to the contact list.

Quitting is only possible from the contact list.

## What it does not do

The package is an interface only. It has no network connection and no
storage: pressing enter in the text box does not send anything, no messages
are received, and contacts are not loaded from or saved anywhere. The message
view shows only its welcome text.

## Using it as a library

Messages and contacts can be built without the terminal:

```python
from pidgypost.contact import Contact
from pidgypost.message import new_received_message, new_sent_message

alice = Contact("Alice")
alice.add_originated(new_sent_message("hello"))
alice.add_terminated(new_received_message("hi there"))
print(alice.originated_msgs[0].metadata.sent_from_client)  # True
```

The screen model in `pidgypost.app` can be driven by hand. `ChatModel.update`
takes a key name, a `Resize` or a `ContactChosen` event and returns a list of
follow-up events, which the caller feeds back in:

```python
from pidgypost.app import Resize, initial_model

model = initial_model()
model.update(Resize(width=90, height=24))
for event in model.update("enter"):   # yields a ContactChosen event
    model.update(event)
print(model.selected.title)           # Name0
print(model.view())
```

The building blocks are also usable on their own: `ContactList` and
`handle_item_key` in `pidgypost.contact_list`, `TextArea` and `Viewport` in
`pidgypost.widgets`, and the key bindings in `pidgypost.keys`.