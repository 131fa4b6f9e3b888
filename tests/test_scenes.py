from errorreboot.component import Component
from errorreboot.gameobject import GameObject
from errorreboot.scenes import DynamicScene


class Recorder(Component):
    def __init__(self):
        self.updates = []
        self.draws = 0

    def update(self, delta_time):
        self.updates.append(delta_time)

    def draw(self):
        self.draws += 1


def test_new_scene_is_empty():
    s = DynamicScene()
    assert len(s) == 0
    assert list(s.objects()) == []


def test_add_object_and_iterate():
    s = DynamicScene()
    a, b = GameObject(), GameObject()
    s.add_object(a)
    s.add_object(b)
    assert list(s.objects()) == [a, b]
    assert len(s) == 2


def test_update_and_draw_reach_objects():
    rec = Recorder()
    s = DynamicScene([GameObject([rec])])
    s.update(0.2)
    s.draw()
    assert rec.updates == [0.2]
    assert rec.draws == 1


def test_clone_is_independent():
    rec = Recorder()
    original = DynamicScene([GameObject([rec])])
    copy_ = original.clone()
    assert len(copy_) == len(original)
    copy_.update(1.0)
    assert rec.updates == []
    cloned_rec = next(copy_.objects()).get_component(Recorder)
    assert cloned_rec.updates == [1.0]
    assert cloned_rec is not rec


def test_clone_does_not_share_list():
    original = DynamicScene()
    copy_ = original.clone()
    copy_.add_object(GameObject())
    assert len(original) == 0
    assert len(copy_) == 1